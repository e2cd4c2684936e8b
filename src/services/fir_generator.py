"""First Information Report (FIR) draft generator.

Turns a loosely-filled incident description into a structurally complete
draft FIR and renders it as a plain-text document. This service:

1. **Validates** that the incident narrative is present -- the only
   mandatory field. Every other gap is filled with an explicit placeholder
   (``[Name]``, ``N/A``, ``Unknown``) so the document is always complete.
2. **Categorises** the incident against an ordered category table; the
   first category with a keyword hit wins.
3. **Assembles a narrative** from date/time, location, the verbatim
   description, night/isolation notes, witnesses and actions taken.
4. **Extracts suspect appearance** cues (height, clothing, age) from the
   description on a best-effort basis.
5. **Compiles an evidence inventory** from six independent checks.
6. **Suggests legal sections** (IPC, IT Act, DV Act). Several rules may
   fire for one description.
7. **Renders** the record into a fixed-layout text document whose banners,
   headings and field order downstream consumers parse.

The output is a DRAFT for human review. It does not determine guilt and
carries no guarantee of legal sufficiency.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Final

import pydantic
import structlog

from src.models.enums import ReportStatus, Severity
from src.models.fir import (
    Complainant,
    EvidenceItem,
    IncidentData,
    IncidentDetails,
    IncidentLocation,
    IncidentRecord,
    LegalSection,
    SuspectProfile,
)
from src.services.exceptions import MissingFieldError, ValidationError
from src.services.lexicon import DEFAULT_LEXICON, Lexicon, normalize_text
from src.services.randomness import RandomSource

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Document layout
# ---------------------------------------------------------------------------

_DOUBLE_RULE: Final[str] = "═" * 51
_SINGLE_RULE: Final[str] = "─" * 49
_TITLE_LINE: Final[str] = "           FIRST INFORMATION REPORT (FIR)          "

SECTION_HEADINGS: Final[tuple[str, ...]] = (
    "COMPLAINANT DETAILS",
    "INCIDENT DETAILS",
    "SUSPECT INFORMATION",
    "EVIDENCE",
    "SUGGESTED LEGAL SECTIONS",
    "SUMMARY",
)

_DRAFT_NOTE: Final[str] = (
    "Note: This is a computer-generated draft. Please verify\n"
    "all details before submitting to authorities.\n"
)

_SUMMARY_DESCRIPTION_LIMIT: Final[int] = 150

# ---------------------------------------------------------------------------
# Evidence inventory entries
# ---------------------------------------------------------------------------

_VISUAL_EVIDENCE: Final[tuple[str, str]] = (
    "Visual Evidence", "Photographs/images of incident scene or suspect",
)
_AUDIO_EVIDENCE: Final[tuple[str, str]] = ("Audio Evidence", "Audio recording of incident")
_TEXT_EVIDENCE: Final[tuple[str, str]] = ("Text/Chat Evidence", "Text messages or chat logs")
_CCTV_EVIDENCE: Final[tuple[str, str]] = ("CCTV Footage", "Available from location/nearby cameras")
_MEDICAL_EVIDENCE: Final[tuple[str, str]] = (
    "Medical Report", "Medical examination report documenting injuries",
)
_NO_EVIDENCE: Final[EvidenceItem] = EvidenceItem(
    type="None",
    description="No physical evidence available at this time",
    available=False,
)


# ---------------------------------------------------------------------------
# Date formatting (en-IN locale rendering)
# ---------------------------------------------------------------------------


def format_date(value: datetime) -> str:
    """``18/10/2026`` -- day and month without zero padding."""
    return f"{value.day}/{value.month}/{value.year}"


def format_time(value: datetime) -> str:
    """``2:05:09 pm`` -- 12-hour clock, lower-case meridiem."""
    hour = value.hour % 12 or 12
    meridiem = "am" if value.hour < 12 else "pm"
    return f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"


def format_datetime(value: datetime) -> str:
    return f"{format_date(value)}, {format_time(value)}"


def _or_default(value: Any, default: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return str(value)


# ---------------------------------------------------------------------------
# FIR generator service
# ---------------------------------------------------------------------------


class FIRGeneratorService:
    """Builds draft FIRs and renders them as plain text.

    Example usage::

        fir = FIRGeneratorService()
        record = fir.generate({"description": "He followed me and grabbed my arm"})
        # record.incident.type => "Stalking"
        document = fir.render_document(record)
    """

    __slots__ = ("_lexicon", "_random")

    def __init__(
        self,
        random_source: RandomSource | None = None,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ) -> None:
        self._random = random_source or RandomSource()
        self._lexicon = lexicon

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, incident: IncidentData | Mapping[str, Any]) -> IncidentRecord:
        """Synthesise a draft FIR from caller-supplied incident fields.

        Parameters
        ----------
        incident:
            An ``IncidentData`` or a mapping with camelCase or snake_case
            keys.

        Returns
        -------
        IncidentRecord
            A complete record in ``DRAFT`` status.

        Raises
        ------
        MissingFieldError
            ``description`` is absent or blank.
        ValidationError
            The mapping could not be parsed into incident fields.
        """
        data = self._coerce(incident)
        if data.description is None or not data.description.strip():
            raise MissingFieldError("description")

        description: str = data.description
        generated_at = self._random.now()
        category = self.categorize(description)

        record = IncidentRecord(
            report_number=self._random.report_number(),
            generated_at=generated_at,
            status=ReportStatus.DRAFT,
            complainant=Complainant(
                name=_or_default(data.name, "[Name]"),
                age=_or_default(data.age, "[Age]"),
                gender=_or_default(data.gender, "Female"),
                contact=_or_default(data.contact, "[Contact Number]"),
                address=_or_default(data.address, "[Address]"),
            ),
            incident=IncidentDetails(
                type=category,
                date_time=data.date_time or generated_at,
                location=IncidentLocation(
                    address=_or_default(data.location, "[Location]"),
                    landmark=_or_default(data.landmark, "N/A"),
                    area=_or_default(data.area, "N/A"),
                    city=_or_default(data.city, "N/A"),
                    state=_or_default(data.state, "N/A"),
                    pincode=_or_default(data.pincode, "N/A"),
                ),
                description=self._build_narrative(data),
            ),
            suspect=self._build_suspect(data),
            evidence=self._compile_evidence(data),
            witnesses=list(data.witnesses),
            injuries=_or_default(data.injuries, "None reported"),
            suggested_sections=self.suggest_legal_sections(description),
            summary=self._build_summary(data, category),
            actions_taken=list(data.actions_taken),
            additional_notes=_or_default(data.notes, "None"),
        )

        logger.info(
            "fir_generator.record_created",
            report_number=record.report_number,
            category=category,
            evidence_count=sum(1 for item in record.evidence if item.available),
            section_count=len(record.suggested_sections),
        )
        return record

    def categorize(self, description: str) -> str:
        """First category in table order with a keyword hit."""
        text = normalize_text(description)
        for rule in self._lexicon.category_rules:
            if rule.matches(text):
                return rule.tag
        return self._lexicon.fallback_category

    def suggest_legal_sections(self, description: str) -> list[LegalSection]:
        """Every rule with a hit contributes its sections, in table order."""
        text = normalize_text(description)
        sections = [
            section
            for rule in self._lexicon.legal_rules
            if rule.matches(text)
            for section in rule.sections
        ]
        return sections or [self._lexicon.legal_fallback]

    def extract_appearance(self, description: str) -> str:
        text = normalize_text(description)
        cues = [cue.tag for cue in self._lexicon.appearance_cues if cue.matches(text)]
        return ", ".join(cues) if cues else self._lexicon.appearance_fallback

    @staticmethod
    def render_document(record: IncidentRecord) -> str:
        """Render a record as the fixed-layout plain-text FIR document."""
        lines: list[str] = [
            _DOUBLE_RULE,
            _TITLE_LINE,
            _DOUBLE_RULE,
            "",
            f"Report Number: {record.report_number}",
            f"Generated: {format_datetime(record.generated_at)}",
            f"Status: {record.status.value}",
            "",
        ]

        complainant = record.complainant
        lines += _section("COMPLAINANT DETAILS")
        lines += [
            f"Name: {complainant.name}",
            f"Age: {complainant.age}",
            f"Gender: {complainant.gender}",
            f"Contact: {complainant.contact}",
            f"Address: {complainant.address}",
            "",
        ]

        incident = record.incident
        lines += _section("INCIDENT DETAILS")
        lines += [
            f"Type: {incident.type}",
            f"Date & Time: {format_datetime(incident.date_time)}",
            f"Location: {incident.location.address}",
            "",
            "Description:",
            incident.description,
            "",
        ]

        suspect = record.suspect
        lines += _section("SUSPECT INFORMATION")
        lines += [
            f"Identified: {'Yes' if suspect.identified else 'No'}",
            f"Name: {suspect.name}",
            f"Appearance: {suspect.appearance}",
            f"Vehicle: {suspect.vehicle}",
            "",
        ]

        lines += _section("EVIDENCE")
        lines += [
            f"{index}. {item.type}: {item.description}"
            for index, item in enumerate(record.evidence, start=1)
        ]
        lines.append("")

        lines += _section("SUGGESTED LEGAL SECTIONS")
        lines += [
            f"{index}. {section.label}"
            for index, section in enumerate(record.suggested_sections, start=1)
        ]
        lines.append("")

        lines += _section("SUMMARY")
        lines += [record.summary, ""]

        lines.append(_DOUBLE_RULE)
        return "\n".join(lines) + "\n" + _DRAFT_NOTE + _DOUBLE_RULE + "\n"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce(incident: IncidentData | Mapping[str, Any] | None) -> IncidentData:
        if isinstance(incident, IncidentData):
            return incident
        if incident is None:
            raise ValidationError("incident_data", "Incident data is required")
        try:
            return IncidentData.model_validate(incident)
        except pydantic.ValidationError as exc:
            fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
            raise ValidationError(
                "incident_data",
                "Incident data could not be parsed",
                {"invalid_fields": fields},
            ) from exc

    @staticmethod
    def _build_narrative(data: IncidentData) -> str:
        parts: list[str] = []

        if data.date_time is not None:
            parts.append(
                f"On {format_date(data.date_time)} at approximately {format_time(data.date_time)}"
            )
        if data.location:
            parts.append(f"at {data.location}")

        parts.append(f"\n\nIncident Description:\n{data.description}")

        if data.is_night:
            parts.append("\n\nNote: Incident occurred during night hours.")
        if data.is_isolated:
            parts.append("Location was isolated with minimal public presence.")
        if data.witnesses:
            parts.append(f"\n\nWitnesses present: {len(data.witnesses)} person(s).")
        if data.actions_taken:
            parts.append("\n\nImmediate Actions Taken:\n- " + "\n- ".join(data.actions_taken))

        return " ".join(parts)

    def _build_suspect(self, data: IncidentData) -> SuspectProfile:
        appearance = data.suspect_appearance or self.extract_appearance(data.description or "")
        return SuspectProfile(
            identified=data.suspect_identified,
            name=_or_default(data.suspect_name, "Unknown"),
            age=_or_default(data.suspect_age, "Unknown"),
            gender=_or_default(data.suspect_gender, "Unknown"),
            appearance=appearance,
            vehicle=_or_default(data.suspect_vehicle, "N/A"),
            weapons=_or_default(data.suspect_weapons, "None reported"),
            additional_info=_or_default(data.suspect_additional_info, "N/A"),
        )

    @staticmethod
    def _compile_evidence(data: IncidentData) -> list[EvidenceItem]:
        checks: list[tuple[bool, tuple[str, str]]] = [
            (bool(data.photos) or data.has_photos, _VISUAL_EVIDENCE),
            (bool(data.audio) or data.has_audio, _AUDIO_EVIDENCE),
            (bool(data.messages) or data.has_messages, _TEXT_EVIDENCE),
            (bool(data.cctv) or data.has_cctv, _CCTV_EVIDENCE),
            (bool(data.medical_report), _MEDICAL_EVIDENCE),
        ]
        evidence = [
            EvidenceItem(type=kind, description=description)
            for present, (kind, description) in checks
            if present
        ]
        if data.location:
            evidence.append(
                EvidenceItem(type="Location Data", description=f"GPS coordinates: {data.location}")
            )
        return evidence or [_NO_EVIDENCE]

    @staticmethod
    def _build_summary(data: IncidentData, category: str) -> str:
        description = data.description or ""
        severity = (data.severity or Severity.MEDIUM).value
        location = data.location or "undisclosed location"

        excerpt = description[:_SUMMARY_DESCRIPTION_LIMIT]
        if len(description) > _SUMMARY_DESCRIPTION_LIMIT:
            excerpt += "..."

        summary = f"This is a {severity} severity incident of {category} that occurred at {location}. "
        summary += f"The complainant has reported: {excerpt}. "
        if data.actions_taken:
            summary += f"Immediate actions taken include: {', '.join(data.actions_taken)}. "
        summary += "Further investigation required."
        return summary


def _section(heading: str) -> list[str]:
    return [_SINGLE_RULE, heading, _SINGLE_RULE]
