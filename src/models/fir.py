"""Data model for First Information Report (FIR) drafts.

``IncidentData`` is the loosely-filled input a caller submits; every field
except ``description`` is optional. ``IncidentRecord`` is the structurally
complete draft produced from it, with explicit placeholder markers wherever
the caller left a gap.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel

from src.models.enums import ReportStatus, Severity

_VALUE_OBJECT_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class IncidentData(BaseModel):
    """Caller-supplied incident fields."""

    model_config = {**_VALUE_OBJECT_CONFIG, "extra": "ignore"}

    description: str | None = None
    severity: Severity | None = None

    # Complainant
    name: str | None = None
    age: str | int | None = None
    gender: str | None = None
    contact: str | None = None
    address: str | None = None

    # When and where
    date_time: datetime | None = None
    location: str | None = None
    landmark: str | None = None
    area: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    is_night: bool = False
    is_isolated: bool = False

    # Suspect
    suspect_identified: bool = False
    suspect_name: str | None = None
    suspect_age: str | int | None = None
    suspect_gender: str | None = None
    suspect_appearance: str | None = None
    suspect_vehicle: str | None = None
    suspect_weapons: str | None = None
    suspect_additional_info: str | None = None

    # Evidence
    photos: list[str] = Field(default_factory=list)
    has_photos: bool = False
    audio: list[str] = Field(default_factory=list)
    has_audio: bool = False
    messages: list[str] = Field(default_factory=list)
    has_messages: bool = False
    cctv: list[str] = Field(default_factory=list)
    # clients send "hasCCTV"
    has_cctv: bool = Field(default=False, validation_alias=AliasChoices("hasCCTV", "hasCctv", "has_cctv"))
    medical_report: str | None = None

    witnesses: list[str] = Field(default_factory=list)
    injuries: str | None = None
    actions_taken: list[str] = Field(default_factory=list)
    notes: str | None = None


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class Complainant(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    name: str
    age: str
    gender: str
    contact: str
    address: str


class IncidentLocation(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    address: str
    landmark: str = "N/A"
    area: str = "N/A"
    city: str = "N/A"
    state: str = "N/A"
    pincode: str = "N/A"


class IncidentDetails(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    type: str
    date_time: datetime
    location: IncidentLocation
    description: str


class SuspectProfile(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    identified: bool = False
    name: str = "Unknown"
    age: str = "Unknown"
    gender: str = "Unknown"
    appearance: str
    vehicle: str = "N/A"
    weapons: str = "None reported"
    additional_info: str = "N/A"


class EvidenceItem(BaseModel):
    model_config = _VALUE_OBJECT_CONFIG

    type: str
    description: str
    available: bool = True


class LegalSection(BaseModel):
    """A suggested statutory provision, e.g. ``IPC Section 354D - Stalking``."""

    model_config = _VALUE_OBJECT_CONFIG

    citation: str
    title: str | None = None

    @property
    def label(self) -> str:
        return f"{self.citation} - {self.title}" if self.title else self.citation


class IncidentRecord(BaseModel):
    """A draft FIR. Never transitioned past ``DRAFT`` by this service."""

    model_config = _VALUE_OBJECT_CONFIG

    report_number: str
    generated_at: datetime
    status: ReportStatus = ReportStatus.DRAFT
    complainant: Complainant
    incident: IncidentDetails
    suspect: SuspectProfile
    evidence: list[EvidenceItem]
    witnesses: list[str] = Field(default_factory=list)
    injuries: str = "None reported"
    suggested_sections: list[LegalSection]
    summary: str
    actions_taken: list[str] = Field(default_factory=list)
    additional_notes: str = "None"
