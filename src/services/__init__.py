"""GuardHer triage core -- classification, routing, coaching, FIR drafting.

Every service here is synchronous and free of I/O. Non-determinism
(phrase choice, identifiers, timestamps) is isolated in ``RandomSource``.
"""

from __future__ import annotations

from src.services.analyzer import IncidentAnalyzer, aggregate
from src.services.evidence import EvidenceLabeler
from src.services.exceptions import (
    InternalCompositionError,
    MissingFieldError,
    TriageError,
    ValidationError,
)
from src.services.fir_generator import FIRGeneratorService
from src.services.lexicon import DEFAULT_LEXICON, Lexicon
from src.services.randomness import RandomSource
from src.services.safety_coach import SafetyCoachService
from src.services.severity import SeverityAssessment, SeverityClassifier
from src.services.topic_router import RouteDecision, TopicMatch, TopicRouter

__all__ = [
    "DEFAULT_LEXICON",
    "EvidenceLabeler",
    "FIRGeneratorService",
    "IncidentAnalyzer",
    "InternalCompositionError",
    "Lexicon",
    "MissingFieldError",
    "RandomSource",
    "RouteDecision",
    "SafetyCoachService",
    "SeverityAssessment",
    "SeverityClassifier",
    "TopicMatch",
    "TopicRouter",
    "TriageError",
    "ValidationError",
    "aggregate",
]
