from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.models.enums import Severity

# Inbound payloads from the mobile client use camelCase keys (``isNight``);
# both spellings are accepted.
_VALUE_OBJECT_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}


class IncidentContext(BaseModel):
    """Situational flags reported alongside a message."""

    model_config = _VALUE_OBJECT_CONFIG

    is_night: bool = False
    is_isolated: bool = False
    has_location: bool = False
    has_witness: bool = False


class ConversationMessage(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    text: str
    context: IncidentContext | None = None


class AnalysisResult(BaseModel):
    """Triage verdict for a single message."""

    model_config = _VALUE_OBJECT_CONFIG

    severity: Severity
    confidence: float = Field(ge=0.0, le=1.0)
    risk_factors: list[str] = Field(default_factory=list)
    evidence_labels: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ConversationResult(BaseModel):
    """Conversation-level verdict folded from per-message results."""

    model_config = _VALUE_OBJECT_CONFIG

    overall_severity: Severity = Severity.LOW
    total_risks: list[str] = Field(default_factory=list)
    message_count: int = 0
