from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    """Ordinal severity tier: LOW < MEDIUM < HIGH."""

    __slots__ = ()

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def highest(cls, first: Severity, second: Severity) -> Severity:
        """Return the more severe of two tiers."""
        return first if first.rank >= second.rank else second


_SEVERITY_RANK: dict[Severity, int] = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
}


class Topic(StrEnum):
    """Chatbot topic buckets, plus the two non-bucket outcomes."""

    __slots__ = ()

    EMERGENCY = "emergency"
    STALKING = "stalking"
    HARASSMENT = "harassment"
    NIGHT_SAFETY = "nightSafety"
    TRANSPORT = "transport"
    CYBER = "cyber"
    LEGAL = "legal"
    EMOTIONAL = "emotional"
    GENERAL = "general"


class ResourceType(StrEnum):
    __slots__ = ()

    EMERGENCY = "emergency"
    SUPPORT = "support"
    REPORTING = "reporting"
    LEGAL = "legal"
    MENTAL_HEALTH = "mental_health"


class ReportStatus(StrEnum):
    __slots__ = ()

    DRAFT = "DRAFT"
