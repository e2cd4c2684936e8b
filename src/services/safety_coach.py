"""Safety coach: composes conversational guidance for a user message.

The coach has two branches:

1. **Emergency** -- the emergency lexicon matched. A fixed message, fixed
   recommendations and fixed helplines are returned straight away at
   severity HIGH. Nothing else is scored and no emotional-support block is
   attached.
2. **Normal** -- the message is scored for severity and routed to a topic.
   The reply is an optional acknowledgment (follow-up turns only) plus the
   topic template, or synthesised general guidance when no topic matched.
   Recommendations come from the coach's severity table; resources are the
   HIGH emergency block (if HIGH) followed by the topic's own helplines.
   An emotional-support block is attached whenever the user sounds
   distressed, independent of topic and severity.

Any unexpected fault while composing becomes the safe fallback reply that
tells the user to call 112 or 100. The coach never raises to its caller
except for a blank question.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from src.models.coach import (
    CoachResponse,
    CoachTurn,
    ConversationSummary,
    EmotionalSupport,
    Resource,
)
from src.models.enums import Severity, Topic
from src.services.exceptions import InternalCompositionError, ValidationError
from src.services.lexicon import (
    CAPABILITY_MENU,
    COMFORT_MESSAGE,
    DEFAULT_LEXICON,
    EMERGENCY_MESSAGE,
    EMERGENCY_RECOMMENDATIONS,
    EMERGENCY_RESOURCES,
    FALLBACK_GUIDANCE_TEMPLATE,
    FALLBACK_MESSAGE,
    GROUNDING_TECHNIQUE,
    PROFESSIONAL_HELP,
    SAFETY_REASSURANCE,
    SAFETY_TIPS_GUIDANCE,
    SELF_CARE_REMINDERS,
    Lexicon,
    contains_any,
    normalize_text,
)
from src.services.randomness import RandomSource
from src.services.severity import SeverityClassifier
from src.services.topic_router import TopicRouter

logger = structlog.get_logger(__name__)


class SafetyCoachService:
    """Conversational safety coach.

    Example usage::

        coach = SafetyCoachService()
        reply = coach.chat("Someone is following me home every evening")
        # reply.topic => Topic.STALKING
        # reply.severity => Severity.LOW (one MEDIUM hit, no night context)
    """

    __slots__ = ("_classifier", "_lexicon", "_random", "_router")

    def __init__(
        self,
        classifier: SeverityClassifier | None = None,
        router: TopicRouter | None = None,
        random_source: RandomSource | None = None,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ) -> None:
        self._lexicon = lexicon
        self._classifier = classifier or SeverityClassifier(lexicon)
        self._router = router or TopicRouter(lexicon)
        self._random = random_source or RandomSource()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def chat(
        self,
        question: str | None,
        history: Sequence[CoachTurn] | None = None,
    ) -> CoachResponse:
        """Compose the coach's reply to ``question``.

        Parameters
        ----------
        question:
            The user's message.
        history:
            Earlier turns of this conversation. An empty history means
            this is the first turn, so no acknowledgment is prepended.

        Raises
        ------
        ValidationError
            ``question`` is missing, not text, or blank.
        """
        if not isinstance(question, str) or not question.strip():
            raise ValidationError("question", "Question is required")

        try:
            return self._compose(question, history or ())
        except InternalCompositionError as exc:
            logger.error("safety_coach.composition_failed", code=exc.code, exc_info=True)
            return self._fallback_response()

    def greeting(self) -> str:
        return self._random.choice(self._lexicon.greetings)

    def needs_follow_up(self, message: str) -> bool:
        return self._router.wants_follow_up(normalize_text(message))

    @staticmethod
    def summarize_history(history: Sequence[CoachTurn]) -> ConversationSummary:
        if not history:
            return ConversationSummary()
        topics = [turn.topic for turn in history if turn.topic]
        return ConversationSummary(
            message_count=len(history),
            topics=list(dict.fromkeys(topics)),
            status="ongoing",
        )

    # ------------------------------------------------------------------
    # Internal: composition
    # ------------------------------------------------------------------

    def _compose(self, question: str, history: Sequence[CoachTurn]) -> CoachResponse:
        try:
            normalized = normalize_text(question)

            decision = self._router.route(normalized)
            if decision.is_emergency:
                logger.warning("safety_coach.emergency_detected")
                return self._emergency_response()

            assessment = self._classifier.classify(normalized)

            text = ""
            if history:
                text += self._random.choice(self._lexicon.acknowledgments) + "\n\n"
            if decision.template is not None:
                text += decision.template
            else:
                text += self._general_guidance(normalized, assessment.severity)

            emotional_support = None
            if self._router.needs_emotional_support(normalized):
                emotional_support = self._emotional_support(normalized)

            response = CoachResponse(
                text=text,
                topic=decision.topic,
                severity=assessment.severity,
                recommendations=list(self._lexicon.coach_recommendations[assessment.severity]),
                resources=self._resources_for(decision.topic, assessment.severity),
                emotional_support=emotional_support,
                conversation_id=self._random.conversation_id(),
                is_emergency=False,
                generated_at=self._random.now(),
            )
            logger.info(
                "safety_coach.response_composed",
                topic=response.topic,
                severity=response.severity,
                turn=len(history) + 1,
                emotional_support=emotional_support is not None,
                resource_count=len(response.resources),
            )
        except Exception as exc:
            raise InternalCompositionError(
                "Failed to compose coach response",
                {"error_type": type(exc).__name__},
            ) from exc

        return response

    def _emergency_response(self) -> CoachResponse:
        return CoachResponse(
            text=EMERGENCY_MESSAGE,
            topic=Topic.EMERGENCY,
            severity=Severity.HIGH,
            recommendations=list(EMERGENCY_RECOMMENDATIONS),
            resources=list(EMERGENCY_RESOURCES),
            emotional_support=None,
            conversation_id=self._random.conversation_id(),
            is_emergency=True,
            generated_at=self._random.now(),
        )

    def _fallback_response(self) -> CoachResponse:
        return CoachResponse(
            text=FALLBACK_MESSAGE,
            topic="error",
            severity="UNKNOWN",
            conversation_id=self._random.conversation_id(),
        )

    def _general_guidance(self, text: str, severity: Severity) -> str:
        """Pick tips, the capability menu, or tier-based fallback guidance."""
        if contains_any(text, self._lexicon.safety_tip_triggers):
            return SAFETY_TIPS_GUIDANCE
        if contains_any(text, self._lexicon.question_triggers):
            return CAPABILITY_MENU

        numbered = "\n".join(
            f"{index}. {recommendation}"
            for index, recommendation in enumerate(self._classifier.recommendations_for(severity), start=1)
        )
        return FALLBACK_GUIDANCE_TEMPLATE.format(recommendations=numbered)

    def _resources_for(self, topic: Topic, severity: Severity) -> list[Resource]:
        resources: list[Resource] = []
        if severity is Severity.HIGH:
            resources.extend(self._lexicon.high_severity_resources)
        resources.extend(self._lexicon.topic_resources.get(topic, self._lexicon.generic_resources))
        return resources

    def _emotional_support(self, text: str) -> EmotionalSupport:
        if contains_any(text, self._lexicon.panic_keywords):
            technique = GROUNDING_TECHNIQUE
        elif contains_any(text, self._lexicon.fear_keywords):
            technique = SAFETY_REASSURANCE
        else:
            technique = SELF_CARE_REMINDERS

        return EmotionalSupport(
            immediate_comfort=COMFORT_MESSAGE,
            coping_technique=technique,
            professional_help=list(PROFESSIONAL_HELP),
        )
