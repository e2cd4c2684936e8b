"""Static keyword tables and canned texts for incident triage.

Everything here is read-only data: keyword sets mapped to a semantic tag
(severity tier, evidence type, chatbot topic, incident category, legal
section) plus the fixed recommendation, resource and template texts that
clients display verbatim.

Ordered tables (topics, FIR categories, legal sections, appearance cues)
are tuples and are always iterated in declaration order. Category and
topic lookups are first-match-wins, so moving an entry changes results.

A single ``DEFAULT_LEXICON`` is built at import time and shared by every
component. Components take a ``Lexicon`` in their constructor so tests can
inject a reduced table.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from src.models.coach import ProfessionalHelp, Resource
from src.models.enums import ResourceType, Severity, Topic
from src.models.fir import LegalSection

# ---------------------------------------------------------------------------
# Matching helpers
# ---------------------------------------------------------------------------


def normalize_text(text: str) -> str:
    """Case-fold incoming text. The only normalisation the core applies."""
    return text.lower()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def matching_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    return [keyword for keyword in keywords if keyword in text]


# ---------------------------------------------------------------------------
# Rule records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class KeywordRule:
    """A tag that applies when any of its keywords occurs in the text."""

    tag: str
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return contains_any(text, self.keywords)


@dataclass(frozen=True, slots=True)
class TopicRule:
    topic: Topic
    keywords: tuple[str, ...]
    template: str

    def matches(self, text: str) -> bool:
        return contains_any(text, self.keywords)


@dataclass(frozen=True, slots=True)
class LegalRule:
    keywords: tuple[str, ...]
    sections: tuple[LegalSection, ...]

    def matches(self, text: str) -> bool:
        return contains_any(text, self.keywords)


# ---------------------------------------------------------------------------
# Severity tiers
# ---------------------------------------------------------------------------

HIGH_SEVERITY_KEYWORDS: Final[tuple[str, ...]] = (
    "assault", "attacked", "rape", "kidnap", "weapon", "knife", "gun",
    "bleeding", "injured", "unconscious", "emergency", "help me",
    "chasing", "grabbed", "forced", "threatening", "violence",
)

MEDIUM_SEVERITY_KEYWORDS: Final[tuple[str, ...]] = (
    "following", "stalking", "harass", "uncomfortable", "scared",
    "suspicious", "alone", "dark", "unsafe", "stranger", "touched",
    "catcall", "lewd", "inappropriate", "creepy",
)

LOW_SEVERITY_KEYWORDS: Final[tuple[str, ...]] = (
    "concerned", "worried", "advice", "precaution", "question",
    "feeling unsafe", "not sure", "should i", "what if",
)

ANALYSIS_RECOMMENDATIONS: Final[Mapping[Severity, tuple[str, ...]]] = MappingProxyType({
    Severity.HIGH: (
        "Contact emergency services immediately (112/100)",
        "Share live location with trusted contacts",
        "Activate SOS alert",
        "Document evidence if safe to do so",
    ),
    Severity.MEDIUM: (
        "Alert trusted contacts",
        "Move to well-lit public area",
        "Call safety helpline",
        "Document incident details",
    ),
    Severity.LOW: (
        "Review safety guidelines",
        "Plan safe routes",
        "Keep emergency contacts ready",
        "Consider safety coaching",
    ),
})

# ---------------------------------------------------------------------------
# Evidence and incident-type markers
# ---------------------------------------------------------------------------

EVIDENCE_RULES: Final[tuple[KeywordRule, ...]] = (
    KeywordRule("visual_evidence", ("photo", "picture", "image")),
    KeywordRule("audio_evidence", ("recording", "audio", "voice")),
    KeywordRule("text_evidence", ("message", "text", "chat")),
    KeywordRule("witness_account", ("witness", "saw", "people")),
)

INCIDENT_RULES: Final[tuple[KeywordRule, ...]] = (
    KeywordRule("physical_incident", ("physical", "touch", "grab")),
    KeywordRule("verbal_harassment", ("verbal", "said", "comment")),
    KeywordRule("cyber_incident", ("online", "social media", "internet")),
)

IMMEDIATE_ACTION_LABEL: Final[str] = "immediate_action_required"
LOCATION_LABEL: Final[str] = "location_data"

EVIDENCE_LABEL_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType({
    "visual_evidence": "Visual evidence available - photograph/image of incident scene or suspect",
    "audio_evidence": "Audio evidence available - recording of incident or threatening communication",
    "text_evidence": "Text evidence available - messages, emails, or written communication",
    "location_data": "Location data available - GPS coordinates and timestamp",
    "witness_account": "Witness testimony available - corroborating account from observer",
})

# ---------------------------------------------------------------------------
# Emergency lexicon (checked before any topic bucket)
# ---------------------------------------------------------------------------

EMERGENCY_KEYWORDS: Final[tuple[str, ...]] = (
    "help me", "help!", "emergency", "danger", "attacking",
    "assault", "rape", "weapon", "knife", "gun", "bleeding",
    "injured", "kidnap", "being attacked", "right now",
)

EMERGENCY_MESSAGE: Final[str] = textwrap.dedent("""\
    🚨 **EMERGENCY DETECTED**

    Your safety is at immediate risk. Please take these actions RIGHT NOW:

    **IMMEDIATE ACTIONS:**
    1. ☎️ Call 112 (National Emergency) or 100 (Police) IMMEDIATELY
    2. 📍 Share your live location with trusted contacts
    3. 🏃 Move to a safe, public place if possible
    4. 📱 Keep your phone accessible
    5. 🎥 Start recording audio/video if safe to do so

    **Emergency Numbers:**
    - Police: 100
    - National Emergency: 112
    - Women Helpline: 1091
    - Ambulance: 108

    I'm here to support you, but please prioritize calling emergency services RIGHT NOW. Your safety is the top priority.

    Are you able to call for help? Let me know if you need guidance on next steps.""")

EMERGENCY_RECOMMENDATIONS: Final[tuple[str, ...]] = (
    "Call emergency services immediately",
    "Move to safe location",
    "Alert trusted contacts",
    "Preserve evidence",
)

EMERGENCY_RESOURCES: Final[tuple[Resource, ...]] = (
    Resource(name="Police", number="100", type=ResourceType.EMERGENCY),
    Resource(name="National Emergency", number="112", type=ResourceType.EMERGENCY),
    Resource(name="Women Helpline", number="1091", type=ResourceType.EMERGENCY),
)

FALLBACK_MESSAGE: Final[str] = (
    "I'm here to help, but I encountered an issue. Could you rephrase your question? "
    "If this is urgent, please call 112 or 100 immediately."
)

# ---------------------------------------------------------------------------
# Topic buckets, in match order
# ---------------------------------------------------------------------------

TOPIC_RULES: Final[tuple[TopicRule, ...]] = (
    TopicRule(
        Topic.EMERGENCY,
        ("help", "emergency", "danger", "attack", "assault", "now", "immediate", "urgent"),
        "This sounds like an emergency. Please call 112 (National Emergency) or 100 (Police) "
        "immediately. Stay in a safe location if possible. Would you like me to guide you "
        "through immediate safety steps?",
    ),
    TopicRule(
        Topic.STALKING,
        ("following", "stalking", "watching", "tracking", "chase"),
        "Being followed is serious. Here's what to do:\n\n"
        "1. Stay in well-lit, public areas\n"
        "2. Don't go home - go to a police station, shop, or crowded place\n"
        "3. Call a trusted contact and share your live location\n"
        "4. Vary your route if this happens regularly\n"
        "5. Document everything - times, locations, descriptions\n"
        "6. File a police complaint under IPC Section 354D (Stalking)\n\n"
        "Are you being followed right now?",
    ),
    TopicRule(
        Topic.HARASSMENT,
        ("harass", "comment", "catcall", "stare", "uncomfortable", "inappropriate"),
        "I'm sorry you're experiencing harassment. You have the right to feel safe. "
        "Here's what you can do:\n\n"
        "1. Firmly say 'NO' or 'STOP' if safe to do so\n"
        "2. Move to a crowded area\n"
        "3. Document the incident (date, time, location, description)\n"
        "4. Report to local police or use women's helpline 1091\n"
        "5. Tell trusted people about the situation\n\n"
        "This can be reported under IPC Section 354A (Sexual Harassment). "
        "Would you like help documenting this incident?",
    ),
    TopicRule(
        Topic.NIGHT_SAFETY,
        ("night", "dark", "late", "alone", "evening"),
        "Nighttime safety is important. Here are key tips:\n\n"
        "1. Share your live location with trusted contacts\n"
        "2. Stay in well-lit areas with people around\n"
        "3. Keep phone charged and accessible\n"
        "4. Use trusted transport - avoid empty buses/autos\n"
        "5. Walk confidently and stay alert\n"
        "6. Have emergency numbers on speed dial\n"
        "7. Trust your instincts - if something feels wrong, it probably is\n\n"
        "Are you traveling somewhere right now? I can give specific advice.",
    ),
    TopicRule(
        Topic.TRANSPORT,
        ("cab", "taxi", "auto", "rickshaw", "uber", "ola", "bus", "metro", "ride"),
        "Transport safety checklist:\n\n"
        "1. Share trip details with trusted contacts\n"
        "2. Check driver photo and vehicle number\n"
        "3. Sit in back seat, never front\n"
        "4. Keep one window slightly open\n"
        "5. Stay alert, don't sleep\n"
        "6. Have emergency contact ready\n"
        "7. Trust your gut - cancel if something feels off\n\n"
        "For suspicious behavior, call 112 immediately. Are you in a vehicle now?",
    ),
    TopicRule(
        Topic.CYBER,
        ("online", "social media", "messages", "photos", "cyber", "blackmail", "leak"),
        "Online safety is crucial. Here's what to do:\n\n"
        "1. Don't engage with the harasser\n"
        "2. Take screenshots of everything\n"
        "3. Block and report the account\n"
        "4. Don't share personal information online\n"
        "5. Report to Cyber Crime Portal: cybercrime.gov.in\n"
        "6. File FIR under IT Act Section 66E or 67\n\n"
        "For blackmail/threats, contact police immediately. Need help documenting cyber evidence?",
    ),
    TopicRule(
        Topic.LEGAL,
        ("fir", "police", "complaint", "report", "legal", "law", "rights", "section"),
        "You have strong legal rights. Key information:\n\n"
        "**Important Laws:**\n"
        "- IPC 354A: Sexual Harassment\n"
        "- IPC 354D: Stalking\n"
        "- IPC 509: Insulting modesty\n"
        "- IPC 375/376: Rape\n"
        "- IPC 354: Assault on woman\n\n"
        "**Your Rights:**\n"
        "- Zero FIR - file anywhere in India\n"
        "- Women police stations available\n"
        "- Right to free legal aid\n"
        "- Cannot be detained at police station\n\n"
        "**Helplines:**\n"
        "- Women Helpline: 1091\n"
        "- Police: 100\n"
        "- National Emergency: 112\n\n"
        "Would you like help preparing an FIR?",
    ),
    TopicRule(
        Topic.EMOTIONAL,
        ("scared", "afraid", "anxious", "worried", "panic", "stress", "fear", "traumatized"),
        "Your feelings are completely valid. What you're experiencing is real, and you deserve support.\n\n"
        "**Immediate comfort:**\n"
        "- Take slow, deep breaths\n"
        "- You are not alone\n"
        "- This is not your fault\n"
        "- Your safety matters most\n\n"
        "**Support resources:**\n"
        "- National Women Helpline: 1091\n"
        "- Mental Health Helpline: 9152987821\n"
        "- Talk to trusted friends/family\n\n"
        "Would you like to talk through what happened? Or would practical safety steps help right now?",
    ),
)

# ---------------------------------------------------------------------------
# General guidance (no topic matched)
# ---------------------------------------------------------------------------

SAFETY_TIP_TRIGGERS: Final[tuple[str, ...]] = ("safe", "protect", "prevent")
QUESTION_TRIGGERS: Final[tuple[str, ...]] = ("what", "how", "should")

SAFETY_TIPS_GUIDANCE: Final[str] = textwrap.dedent("""\
    Here are general safety guidelines to keep you protected:

    **Personal Safety:**
    - Trust your instincts - if something feels wrong, it probably is
    - Stay alert and aware of your surroundings
    - Keep your phone charged and accessible
    - Share your location with trusted contacts
    - Avoid isolated areas, especially at night

    **Emergency Preparedness:**
    - Save emergency numbers on speed dial
    - Know the location of nearby police stations
    - Keep important contacts readily available
    - Learn basic self-defense techniques

    **Digital Safety:**
    - Be cautious with personal information online
    - Use strong privacy settings
    - Don't share location publicly in real-time
    - Report any online harassment immediately

    Is there a specific situation you'd like guidance on?""")

CAPABILITY_MENU: Final[str] = textwrap.dedent("""\
    I'm here to help! I can assist you with:

    ✓ Emergency response guidance
    ✓ Safety tips for specific situations
    ✓ Information about your legal rights
    ✓ How to report incidents
    ✓ Transport and travel safety
    ✓ Online/cyber safety
    ✓ Dealing with harassment or stalking
    ✓ Self-defense strategies
    ✓ Support resources

    What specific situation would you like help with?""")

FALLBACK_GUIDANCE_TEMPLATE: Final[str] = textwrap.dedent("""\
    I understand you're concerned about your safety. I'm here to help with any situation you're facing.

    Based on what you've shared, here are some things to consider:

    {recommendations}

    Would you like to tell me more about your specific concern so I can provide more targeted guidance?""")

# ---------------------------------------------------------------------------
# Coach recommendations and resources
# ---------------------------------------------------------------------------

COACH_RECOMMENDATIONS: Final[Mapping[Severity, tuple[str, ...]]] = MappingProxyType({
    Severity.HIGH: (
        "Contact emergency services immediately (112/100)",
        "Share live location with trusted contacts",
        "Move to well-lit, crowded area if possible",
        "Document everything - photos, videos, messages",
        "Seek medical attention if injured",
        "File police complaint as soon as safe",
    ),
    Severity.MEDIUM: (
        "Alert trusted contacts about the situation",
        "Move to a safe, public location",
        "Call Women Helpline 1091 for guidance",
        "Document incident details immediately",
        "Consider filing police complaint",
        "Avoid being alone until situation resolves",
    ),
    Severity.LOW: (
        "Stay alert and trust your instincts",
        "Share your plans with someone you trust",
        "Keep emergency contacts accessible",
        "Review safety guidelines for your situation",
        "Consider taking self-defense training",
        "Join community safety groups",
    ),
})

HIGH_SEVERITY_RESOURCES: Final[tuple[Resource, ...]] = (
    Resource(name="Police Emergency", number="100", type=ResourceType.EMERGENCY),
    Resource(name="National Emergency", number="112", type=ResourceType.EMERGENCY),
    Resource(name="Women Helpline", number="1091", type=ResourceType.EMERGENCY),
    Resource(name="Ambulance", number="108", type=ResourceType.EMERGENCY),
)

TOPIC_RESOURCES: Final[Mapping[Topic, tuple[Resource, ...]]] = MappingProxyType({
    Topic.CYBER: (
        Resource(name="Cyber Crime Portal", url="https://cybercrime.gov.in", type=ResourceType.REPORTING),
        Resource(name="Women Helpline", number="1091", type=ResourceType.SUPPORT),
    ),
    Topic.LEGAL: (
        Resource(name="Legal Services Authority", number="15100", type=ResourceType.LEGAL),
        Resource(name="Women Commission", url="https://ncw.nic.in", type=ResourceType.LEGAL),
    ),
    Topic.EMOTIONAL: (
        Resource(name="Vandrevala Foundation", number="1860-2662-345", type=ResourceType.MENTAL_HEALTH),
        Resource(name="iCall Helpline", number="9152987821", type=ResourceType.MENTAL_HEALTH),
        Resource(name="NIMHANS", number="080-46110007", type=ResourceType.MENTAL_HEALTH),
    ),
})

GENERIC_RESOURCES: Final[tuple[Resource, ...]] = (
    Resource(name="Women Helpline", number="1091", type=ResourceType.SUPPORT),
    Resource(name="Police", number="100", type=ResourceType.EMERGENCY),
)

# ---------------------------------------------------------------------------
# Conversation phrases
# ---------------------------------------------------------------------------

ACKNOWLEDGMENTS: Final[tuple[str, ...]] = (
    "I understand. Let me help you with that.",
    "Thank you for sharing. I'm here to support you.",
    "I hear you. Let's work through this together.",
)

GREETINGS: Final[tuple[str, ...]] = (
    "Hello! I'm your safety coach. I'm here to help you stay safe and answer any "
    "safety-related questions. How can I assist you today?",
    "Hi! I'm here to support you with any safety concerns or questions. What would you like to know?",
    "Welcome! I'm your personal safety advisor. Feel free to ask me anything about staying safe.",
)

SATISFACTION_KEYWORDS: Final[tuple[str, ...]] = (
    "thank", "thanks", "helpful", "got it", "understand", "okay", "ok",
)
NEEDS_MORE_KEYWORDS: Final[tuple[str, ...]] = ("but", "what if", "also", "another", "more")

# ---------------------------------------------------------------------------
# Emotional support
# ---------------------------------------------------------------------------

EMOTIONAL_KEYWORDS: Final[tuple[str, ...]] = (
    "scared", "afraid", "terrified", "anxious", "worried",
    "panic", "stress", "fear", "traumatized", "upset",
    "crying", "shaking", "can't sleep", "nightmare",
    "depressed", "helpless", "alone",
)
PANIC_KEYWORDS: Final[tuple[str, ...]] = ("panic", "anxious", "shaking")
FEAR_KEYWORDS: Final[tuple[str, ...]] = ("scared", "afraid", "terrified")

COMFORT_MESSAGE: Final[str] = textwrap.dedent("""\
    💚 I want you to know:

    - You are safe right now
    - What you're feeling is completely normal
    - Your reaction is valid
    - You are not alone
    - It's okay to ask for help
    - This is not your fault

    Take a moment to breathe. You've been brave by reaching out.""")

GROUNDING_TECHNIQUE: Final[str] = textwrap.dedent("""\
    **Grounding Technique (Try this now):**

    Look around and name:
    - 5 things you can see
    - 4 things you can touch
    - 3 things you can hear
    - 2 things you can smell
    - 1 thing you can taste

    **Breathing Exercise:**
    1. Breathe in slowly for 4 counts
    2. Hold for 4 counts
    3. Breathe out slowly for 4 counts
    4. Repeat 4 times

    This can help calm your nervous system.""")

SAFETY_REASSURANCE: Final[str] = textwrap.dedent("""\
    **Safety Reassurance:**

    Right now, in this moment:
    - You are in a safe space
    - You have taken action by reaching out
    - You have control over your next steps
    - Help is available to you

    **What might help:**
    - Talk to someone you trust
    - Focus on what you can control
    - Take things one step at a time
    - Be gentle with yourself""")

SELF_CARE_REMINDERS: Final[str] = textwrap.dedent("""\
    **Self-Care Reminders:**

    - Your feelings are valid - allow yourself to feel them
    - Healing is not linear - take your time
    - Small steps are still progress
    - You deserve support and care
    - It's okay to not be okay right now

    **Things that might help:**
    - Talk to a trusted friend or family member
    - Write down your feelings
    - Engage in activities that comfort you
    - Get adequate rest
    - Reach out to professional support""")

PROFESSIONAL_HELP: Final[tuple[ProfessionalHelp, ...]] = (
    ProfessionalHelp(name="Vandrevala Foundation (24/7)", number="1860-2662-345", note="Free mental health support"),
    ProfessionalHelp(name="iCall Psychological Helpline", number="9152987821", note="Mon-Sat, 8am-10pm"),
    ProfessionalHelp(name="NIMHANS Helpline", number="080-46110007", note="Mental health emergency"),
)

# ---------------------------------------------------------------------------
# FIR: incident categories (first match wins)
# ---------------------------------------------------------------------------

CATEGORY_RULES: Final[tuple[KeywordRule, ...]] = (
    KeywordRule("Sexual Harassment", ("harass", "touch", "inappropriate", "molest", "grope", "catcall", "lewd")),
    KeywordRule("Physical Assault", ("assault", "hit", "punch", "kick", "beat", "attack", "injured")),
    KeywordRule("Stalking", ("stalk", "follow", "chase", "watching", "trailing")),
    KeywordRule("Threat/Intimidation", ("threat", "intimidat", "blackmail", "coerce", "force")),
    KeywordRule("Rape/Attempt to Rape", ("rape", "sexual assault", "forced")),
    KeywordRule("Domestic Violence", ("husband", "family", "domestic", "home violence")),
    KeywordRule("Cybercrime", ("online", "social media", "cyber", "internet", "digital")),
    KeywordRule("Eve Teasing", ("eve teas", "comment", "whistle", "gesture")),
    KeywordRule("Kidnapping/Abduction", ("kidnap", "abduct", "taken", "forced into vehicle")),
    KeywordRule("Other", ()),
)
FALLBACK_CATEGORY: Final[str] = "General Safety Concern"

# ---------------------------------------------------------------------------
# FIR: legal sections (every matching rule contributes)
# ---------------------------------------------------------------------------

LEGAL_RULES: Final[tuple[LegalRule, ...]] = (
    LegalRule(
        ("harass", "touch", "inappropriate"),
        (
            LegalSection(citation="IPC Section 354A", title="Sexual Harassment"),
            LegalSection(
                citation="IPC Section 509",
                title="Word, gesture or act intended to insult modesty of a woman",
            ),
        ),
    ),
    LegalRule(
        ("assault", "attack", "hit"),
        (
            LegalSection(
                citation="IPC Section 354",
                title="Assault or criminal force to woman with intent to outrage her modesty",
            ),
            LegalSection(citation="IPC Section 323", title="Punishment for voluntarily causing hurt"),
        ),
    ),
    LegalRule(
        ("stalk", "follow"),
        (LegalSection(citation="IPC Section 354D", title="Stalking"),),
    ),
    LegalRule(
        ("rape", "sexual assault"),
        (
            LegalSection(citation="IPC Section 375/376", title="Rape"),
            LegalSection(citation="IPC Section 354", title="Assault on woman with intent to outrage her modesty"),
        ),
    ),
    LegalRule(
        ("kidnap", "abduct"),
        (
            LegalSection(citation="IPC Section 363", title="Kidnapping"),
            LegalSection(
                citation="IPC Section 366",
                title="Kidnapping, abducting or inducing woman to compel her marriage",
            ),
        ),
    ),
    LegalRule(
        ("domestic", "husband", "family"),
        (LegalSection(citation="Protection of Women from Domestic Violence Act, 2005"),),
    ),
    LegalRule(
        ("online", "cyber", "social media"),
        (
            LegalSection(citation="IT Act Section 66E", title="Violation of privacy"),
            LegalSection(citation="IPC Section 354C", title="Voyeurism"),
        ),
    ),
)
LEGAL_FALLBACK: Final[LegalSection] = LegalSection(citation="To be determined based on investigation")

# ---------------------------------------------------------------------------
# FIR: suspect appearance cues (independent, all that match)
# ---------------------------------------------------------------------------

APPEARANCE_CUES: Final[tuple[KeywordRule, ...]] = (
    KeywordRule("Tall build", ("tall",)),
    KeywordRule("Short build", ("short",)),
    KeywordRule("Dark clothing", ("black shirt", "dark clothes")),
    KeywordRule("Wearing helmet", ("helmet",)),
    KeywordRule("Face covered", ("mask",)),
    KeywordRule("Approximately 20-30 years", ("young",)),
    KeywordRule("Approximately 35-50 years", ("middle aged",)),
    KeywordRule("Approximately 50+ years", ("old",)),
)
APPEARANCE_FALLBACK: Final[str] = "No clear description available"


# ---------------------------------------------------------------------------
# Lexicon bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Every keyword table and canned text, bundled for injection."""

    high_keywords: tuple[str, ...] = HIGH_SEVERITY_KEYWORDS
    medium_keywords: tuple[str, ...] = MEDIUM_SEVERITY_KEYWORDS
    low_keywords: tuple[str, ...] = LOW_SEVERITY_KEYWORDS
    analysis_recommendations: Mapping[Severity, tuple[str, ...]] = field(
        default_factory=lambda: ANALYSIS_RECOMMENDATIONS
    )

    evidence_rules: tuple[KeywordRule, ...] = EVIDENCE_RULES
    incident_rules: tuple[KeywordRule, ...] = INCIDENT_RULES
    evidence_descriptions: Mapping[str, str] = field(default_factory=lambda: EVIDENCE_LABEL_DESCRIPTIONS)

    emergency_keywords: tuple[str, ...] = EMERGENCY_KEYWORDS
    topic_rules: tuple[TopicRule, ...] = TOPIC_RULES
    emotional_keywords: tuple[str, ...] = EMOTIONAL_KEYWORDS
    panic_keywords: tuple[str, ...] = PANIC_KEYWORDS
    fear_keywords: tuple[str, ...] = FEAR_KEYWORDS
    satisfaction_keywords: tuple[str, ...] = SATISFACTION_KEYWORDS
    needs_more_keywords: tuple[str, ...] = NEEDS_MORE_KEYWORDS
    safety_tip_triggers: tuple[str, ...] = SAFETY_TIP_TRIGGERS
    question_triggers: tuple[str, ...] = QUESTION_TRIGGERS

    coach_recommendations: Mapping[Severity, tuple[str, ...]] = field(
        default_factory=lambda: COACH_RECOMMENDATIONS
    )
    high_severity_resources: tuple[Resource, ...] = HIGH_SEVERITY_RESOURCES
    topic_resources: Mapping[Topic, tuple[Resource, ...]] = field(default_factory=lambda: TOPIC_RESOURCES)
    generic_resources: tuple[Resource, ...] = GENERIC_RESOURCES
    acknowledgments: tuple[str, ...] = ACKNOWLEDGMENTS
    greetings: tuple[str, ...] = GREETINGS

    category_rules: tuple[KeywordRule, ...] = CATEGORY_RULES
    fallback_category: str = FALLBACK_CATEGORY
    legal_rules: tuple[LegalRule, ...] = LEGAL_RULES
    legal_fallback: LegalSection = LEGAL_FALLBACK
    appearance_cues: tuple[KeywordRule, ...] = APPEARANCE_CUES
    appearance_fallback: str = APPEARANCE_FALLBACK


DEFAULT_LEXICON: Final[Lexicon] = Lexicon()
