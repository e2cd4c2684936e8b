"""Tests for the safety coach response composer."""

from __future__ import annotations

import random
import re
from datetime import UTC, datetime

import pytest

from src.models.analysis import IncidentContext
from src.models.coach import CoachTurn
from src.models.enums import Severity, Topic
from src.services.exceptions import ValidationError
from src.services.lexicon import (
    ACKNOWLEDGMENTS,
    CAPABILITY_MENU,
    COACH_RECOMMENDATIONS,
    COMFORT_MESSAGE,
    EMERGENCY_MESSAGE,
    EMERGENCY_RECOMMENDATIONS,
    EMERGENCY_RESOURCES,
    FALLBACK_MESSAGE,
    GENERIC_RESOURCES,
    GREETINGS,
    GROUNDING_TECHNIQUE,
    HIGH_SEVERITY_RESOURCES,
    SAFETY_REASSURANCE,
    SAFETY_TIPS_GUIDANCE,
    SELF_CARE_REMINDERS,
    TOPIC_RESOURCES,
    TOPIC_RULES,
)
from src.services.randomness import RandomSource
from src.services.safety_coach import SafetyCoachService
from src.services.severity import SeverityClassifier
from src.services.topic_router import RouteDecision, TopicRouter

FIXED_NOW = datetime(2026, 3, 5, 21, 30, tzinfo=UTC)
CONVERSATION_ID = re.compile(r"^coach-\d+-[0-9a-z]{9}$")


def _random_source(seed: int = 42) -> RandomSource:
    return RandomSource(random.Random(seed), clock=lambda: FIXED_NOW)


class _BrokenClassifier(SeverityClassifier):
    __slots__ = ()

    def classify(self, text: str, context: IncidentContext | None = None):
        raise RuntimeError("lexicon unavailable")


class _PinnedRouter(TopicRouter):
    """Router whose decision is fixed regardless of the text."""

    __slots__ = ("_decision",)

    def __init__(self, decision: RouteDecision) -> None:
        super().__init__()
        self._decision = decision

    def route(self, text: str) -> RouteDecision:
        return self._decision


class _UncountableHistory(list):
    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        raise TypeError("history length unavailable")


@pytest.fixture
def coach() -> SafetyCoachService:
    return SafetyCoachService(random_source=_random_source())


# -----------------------------------------------------------------------
# Emergency branch
# -----------------------------------------------------------------------


class TestEmergencyBranch:
    @pytest.mark.parametrize("question", ["Please help me", "Is there a weapon nearby?"])
    def test_short_circuits(self, coach: SafetyCoachService, question: str) -> None:
        response = coach.chat(question)
        assert response.is_emergency is True
        assert response.severity is Severity.HIGH
        assert response.topic is Topic.EMERGENCY
        assert response.text == EMERGENCY_MESSAGE
        assert response.recommendations == list(EMERGENCY_RECOMMENDATIONS)
        assert response.resources == list(EMERGENCY_RESOURCES)

    def test_no_emotional_support_even_when_distressed(self, coach: SafetyCoachService) -> None:
        response = coach.chat("I'm terrified, help me")
        assert response.is_emergency is True
        assert response.emotional_support is None

    def test_carries_conversation_id(self, coach: SafetyCoachService) -> None:
        assert CONVERSATION_ID.match(coach.chat("help me").conversation_id)

    def test_emergency_numbers(self, coach: SafetyCoachService) -> None:
        numbers = [resource.number for resource in coach.chat("help me").resources]
        assert numbers == ["100", "112", "1091"]

    def test_follows_router_decision(self) -> None:
        router = _PinnedRouter(RouteDecision(is_emergency=True, topic=Topic.EMERGENCY))
        coach = SafetyCoachService(router=router, random_source=_random_source())
        response = coach.chat("Is it okay to walk alone?")
        assert response.is_emergency is True
        assert response.text == EMERGENCY_MESSAGE


# -----------------------------------------------------------------------
# Normal branch
# -----------------------------------------------------------------------


class TestNormalBranch:
    def test_topic_and_template_come_from_router(self) -> None:
        router = _PinnedRouter(
            RouteDecision(is_emergency=False, topic=Topic.CYBER, template="Cyber guidance."),
        )
        coach = SafetyCoachService(router=router, random_source=_random_source())
        response = coach.chat("Is it okay to walk alone?")
        assert response.topic is Topic.CYBER
        assert response.text == "Cyber guidance."

    def test_first_turn_uses_topic_template(self, coach: SafetyCoachService) -> None:
        response = coach.chat("Someone is following me home every evening")
        assert response.topic is Topic.STALKING
        assert response.severity is Severity.LOW
        assert response.text == TOPIC_RULES[1].template
        assert response.recommendations == list(COACH_RECOMMENDATIONS[Severity.LOW])
        assert response.resources == list(GENERIC_RESOURCES)
        assert response.emotional_support is None
        assert response.is_emergency is False

    def test_follow_up_turn_is_acknowledged(self, coach: SafetyCoachService) -> None:
        history = [CoachTurn(role="user", text="hi"), CoachTurn(role="coach", text="Hello!")]
        response = coach.chat("Someone is following me home every evening", history)
        acknowledgment, _, rest = response.text.partition("\n\n")
        assert acknowledgment in ACKNOWLEDGMENTS
        assert rest == TOPIC_RULES[1].template

    def test_high_severity_prepends_emergency_block(self, coach: SafetyCoachService) -> None:
        response = coach.chat("He grabbed me and forced me into a corner")
        assert response.severity is Severity.HIGH
        assert response.is_emergency is False
        assert response.topic is Topic.GENERAL
        assert response.resources == [*HIGH_SEVERITY_RESOURCES, *GENERIC_RESOURCES]
        assert response.recommendations == list(COACH_RECOMMENDATIONS[Severity.HIGH])

    def test_general_fallback_enumerates_tier_recommendations(self, coach: SafetyCoachService) -> None:
        response = coach.chat("He grabbed me and forced me into a corner")
        assert "1. Contact emergency services immediately (112/100)" in response.text
        assert "4. Document evidence if safe to do so" in response.text

    def test_topic_resources(self, coach: SafetyCoachService) -> None:
        response = coach.chat("Someone is sharing my photos on social media")
        assert response.topic is Topic.CYBER
        assert response.resources == list(TOPIC_RESOURCES[Topic.CYBER])

    def test_safety_tips(self, coach: SafetyCoachService) -> None:
        response = coach.chat("Tips to protect myself")
        assert response.topic is Topic.GENERAL
        assert response.text == SAFETY_TIPS_GUIDANCE

    def test_capability_menu(self, coach: SafetyCoachService) -> None:
        assert coach.chat("What can you do for me?").text == CAPABILITY_MENU


# -----------------------------------------------------------------------
# Emotional support
# -----------------------------------------------------------------------


class TestEmotionalSupport:
    def test_panic_gets_grounding(self, coach: SafetyCoachService) -> None:
        response = coach.chat("I am scared and shaking, someone is following me")
        assert response.topic is Topic.STALKING
        assert response.severity is Severity.MEDIUM
        support = response.emotional_support
        assert support is not None
        assert support.immediate_comfort == COMFORT_MESSAGE
        assert support.coping_technique == GROUNDING_TECHNIQUE
        assert [helpline.number for helpline in support.professional_help] == [
            "1860-2662-345",
            "9152987821",
            "080-46110007",
        ]

    def test_fear_gets_reassurance(self, coach: SafetyCoachService) -> None:
        response = coach.chat("I feel afraid walking to the bus stop")
        assert response.topic is Topic.TRANSPORT
        assert response.emotional_support.coping_technique == SAFETY_REASSURANCE

    def test_other_distress_gets_self_care(self, coach: SafetyCoachService) -> None:
        response = coach.chat("I have nightmares about that day")
        assert response.emotional_support.coping_technique == SELF_CARE_REMINDERS


# -----------------------------------------------------------------------
# Failure handling and validation
# -----------------------------------------------------------------------


class TestFailures:
    def test_internal_fault_becomes_fallback(self) -> None:
        coach = SafetyCoachService(classifier=_BrokenClassifier(), random_source=_random_source())
        response = coach.chat("Is it okay to walk alone?")
        assert response.text == FALLBACK_MESSAGE
        assert response.severity == "UNKNOWN"
        assert response.topic == "error"
        assert "112" in response.text and "100" in response.text
        assert CONVERSATION_ID.match(response.conversation_id)

    @pytest.mark.parametrize("question", [None, "", "   ", 123, ["help"]])
    def test_blank_or_non_text_question_is_rejected(self, coach: SafetyCoachService, question: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            coach.chat(question)
        assert exc_info.value.field == "question"

    def test_fault_while_logging_becomes_fallback(self, coach: SafetyCoachService) -> None:
        response = coach.chat("Is it okay to walk alone?", _UncountableHistory([CoachTurn(text="hi")]))
        assert response.text == FALLBACK_MESSAGE
        assert response.topic == "error"


# -----------------------------------------------------------------------
# Determinism and helpers
# -----------------------------------------------------------------------


def test_seeded_source_is_reproducible() -> None:
    history = [CoachTurn(text="hi")]
    first = SafetyCoachService(random_source=_random_source(7)).chat("someone is following me", history)
    second = SafetyCoachService(random_source=_random_source(7)).chat("someone is following me", history)
    assert first == second
    assert first.generated_at == FIXED_NOW


def test_greeting(coach: SafetyCoachService) -> None:
    assert coach.greeting() in GREETINGS


def test_needs_follow_up(coach: SafetyCoachService) -> None:
    assert coach.needs_follow_up("Thanks, that was helpful") is False
    assert coach.needs_follow_up("Okay, but what if he comes back?") is True


def test_summarize_history() -> None:
    assert SafetyCoachService.summarize_history([]).status == "new"

    summary = SafetyCoachService.summarize_history([
        CoachTurn(text="someone follows me", topic="stalking"),
        CoachTurn(role="coach", text="Are you being followed right now?"),
        CoachTurn(text="it happens every night", topic="nightSafety"),
        CoachTurn(text="he follows me again", topic="stalking"),
    ])
    assert summary.message_count == 4
    assert summary.topics == ["stalking", "nightSafety"]
    assert summary.status == "ongoing"
