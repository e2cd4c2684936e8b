"""Incident triage: single-message analysis and conversation aggregation.

``IncidentAnalyzer`` is the entry point the transport layer calls for the
``analyze`` and ``analyzeConversation`` operations. It normalises text once,
then runs the severity classifier and evidence labeller on the same string.

Conversation aggregation is a pure fold: the overall tier is the maximum
per-message tier under LOW < MEDIUM < HIGH and the risk factors are the
union across messages. Every message is scored even after HIGH is reached
so that its risk factors still make it into the union.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from src.models.analysis import (
    AnalysisResult,
    ConversationMessage,
    ConversationResult,
    IncidentContext,
)
from src.models.enums import Severity
from src.services.evidence import EvidenceLabeler
from src.services.exceptions import ValidationError
from src.services.lexicon import normalize_text
from src.services.randomness import RandomSource
from src.services.severity import SeverityClassifier

logger = structlog.get_logger(__name__)


def aggregate(results: Iterable[AnalysisResult]) -> ConversationResult:
    """Fold per-message results into one conversation verdict."""
    overall = Severity.LOW
    risks: dict[str, None] = {}
    count = 0

    for result in results:
        overall = Severity.highest(overall, result.severity)
        risks.update(dict.fromkeys(result.risk_factors))
        count += 1

    return ConversationResult(
        overall_severity=overall,
        total_risks=list(risks),
        message_count=count,
    )


class IncidentAnalyzer:
    """Triage a message, or a whole conversation, into a severity verdict.

    Example usage::

        analyzer = IncidentAnalyzer()
        result = analyzer.analyze(
            "A stranger touched me inappropriately and made lewd comments",
            IncidentContext(is_night=False),
        )
        # result.severity => Severity.MEDIUM
    """

    __slots__ = ("_classifier", "_labeler", "_random")

    def __init__(
        self,
        classifier: SeverityClassifier | None = None,
        labeler: EvidenceLabeler | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._classifier = classifier or SeverityClassifier()
        self._labeler = labeler or EvidenceLabeler()
        self._random = random_source or RandomSource()

    def analyze(self, text: str | None, context: IncidentContext | None = None) -> AnalysisResult:
        """Classify one message.

        Raises:
            ValidationError: ``text`` is missing or blank.
        """
        if text is None or not text.strip():
            raise ValidationError("text", "Message is required")

        normalized = normalize_text(text)
        assessment = self._classifier.classify(normalized, context)
        labels = self._labeler.label(normalized, assessment.severity, context)

        result = AnalysisResult(
            severity=assessment.severity,
            confidence=assessment.confidence,
            risk_factors=list(assessment.risk_factors),
            evidence_labels=labels,
            recommendations=self._classifier.recommendations_for(assessment.severity),
            generated_at=self._random.now(),
        )

        logger.info(
            "analyzer.message_analyzed",
            severity=result.severity.value,
            confidence=result.confidence,
            risk_factor_count=len(result.risk_factors),
            evidence_labels=result.evidence_labels,
        )
        return result

    def analyze_conversation(
        self, messages: Sequence[ConversationMessage] | None
    ) -> ConversationResult:
        """Score every message and fold the results.

        Raises:
            ValidationError: no messages, or a message with blank text.
        """
        if not messages:
            raise ValidationError("messages", "Messages array is required")

        for index, message in enumerate(messages):
            if not message.text.strip():
                raise ValidationError(
                    "messages",
                    f"Message {index} has no text",
                    {"index": index},
                )

        result = aggregate(self.analyze(message.text, message.context) for message in messages)

        logger.info(
            "analyzer.conversation_analyzed",
            overall_severity=result.overall_severity.value,
            message_count=result.message_count,
            total_risk_count=len(result.total_risks),
        )
        return result
