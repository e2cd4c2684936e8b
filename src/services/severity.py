"""Rule-based severity classification for a single message.

Counts keyword hits per tier and applies a fixed decision policy:

1. any HIGH hit                          -> HIGH,   ``min(0.7 + 0.1 * high, 0.95)``
2. two MEDIUM hits, or one MEDIUM at night -> MEDIUM, ``0.6 + 0.05 * medium``
3. otherwise                             -> LOW,    ``0.5``

Night and isolation each add 0.05 afterwards. The night flag therefore
both lowers the MEDIUM threshold and raises confidence; that asymmetry is
kept as-is.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.models.analysis import IncidentContext
from src.models.enums import Severity
from src.services.lexicon import DEFAULT_LEXICON, Lexicon, matching_keywords

logger = structlog.get_logger(__name__)

_CONTEXT_BOOST = 0.05
_MAX_CONFIDENCE = 1.0


@dataclass(frozen=True, slots=True)
class SeverityAssessment:
    """Tier decision for one message plus the hits that produced it."""

    severity: Severity
    confidence: float
    risk_factors: tuple[str, ...]
    high_count: int
    medium_count: int
    low_count: int


class SeverityClassifier:
    """Scores normalised text against the HIGH/MEDIUM/LOW keyword tiers."""

    __slots__ = ("_lexicon",)

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self._lexicon = lexicon

    def classify(self, text: str, context: IncidentContext | None = None) -> SeverityAssessment:
        """Classify already case-folded ``text``.

        LOW hits are counted but never reported as risk factors.
        """
        context = context or IncidentContext()

        high_hits = matching_keywords(text, self._lexicon.high_keywords)
        medium_hits = matching_keywords(text, self._lexicon.medium_keywords)
        low_count = len(matching_keywords(text, self._lexicon.low_keywords))

        high_count = len(high_hits)
        medium_count = len(medium_hits)

        if high_count >= 1:
            severity = Severity.HIGH
            confidence = min(0.7 + 0.1 * high_count, 0.95)
        elif medium_count >= 2 or (medium_count >= 1 and context.is_night):
            severity = Severity.MEDIUM
            confidence = 0.6 + 0.05 * medium_count
        else:
            severity = Severity.LOW
            confidence = 0.5

        if context.is_night:
            confidence += _CONTEXT_BOOST
        if context.is_isolated:
            confidence += _CONTEXT_BOOST
        confidence = round(min(confidence, _MAX_CONFIDENCE), 2)

        risk_factors = tuple(dict.fromkeys(high_hits + medium_hits))

        logger.debug(
            "severity.classified",
            severity=severity.value,
            confidence=confidence,
            high_count=high_count,
            medium_count=medium_count,
            low_count=low_count,
        )

        return SeverityAssessment(
            severity=severity,
            confidence=confidence,
            risk_factors=risk_factors,
            high_count=high_count,
            medium_count=medium_count,
            low_count=low_count,
        )

    def recommendations_for(self, severity: Severity) -> list[str]:
        return list(self._lexicon.analysis_recommendations[severity])
