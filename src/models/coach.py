from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from src.models.enums import ResourceType, Severity, Topic

_VALUE_OBJECT_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}


class Resource(BaseModel):
    """A helpline number or reporting portal offered to the user."""

    model_config = _VALUE_OBJECT_CONFIG

    name: str
    number: str | None = None
    url: str | None = None
    type: ResourceType

    @model_validator(mode="after")
    def _require_contact(self) -> Resource:
        if self.number is None and self.url is None:
            raise ValueError("a resource needs a number or a url")
        return self


class ProfessionalHelp(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    name: str
    number: str
    note: str


class EmotionalSupport(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    immediate_comfort: str
    coping_technique: str
    professional_help: list[ProfessionalHelp] = Field(default_factory=list)


class CoachTurn(BaseModel):
    """One earlier turn of a coach conversation."""

    model_config = _VALUE_OBJECT_CONFIG

    role: str = "user"
    text: str = ""
    topic: str | None = None


class ConversationSummary(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    message_count: int = 0
    topics: list[str] = Field(default_factory=list)
    status: Literal["new", "ongoing"] = "new"


class CoachResponse(BaseModel):
    """Reply composed by the safety coach for a single turn."""

    model_config = _VALUE_OBJECT_CONFIG

    text: str
    topic: Topic | Literal["error"]
    severity: Severity | Literal["UNKNOWN"]
    recommendations: list[str] = Field(default_factory=list)
    resources: list[Resource] = Field(default_factory=list)
    emotional_support: EmotionalSupport | None = None
    conversation_id: str
    is_emergency: bool = False
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
