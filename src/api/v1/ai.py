"""Incident triage API endpoints for GuardHer.

Thin adapter over the triage core: parses the request, calls one service
operation and wraps the result as ``{"success": true, "data": ...}``.
Core ``ValidationError``s become HTTP 400 with the error's ``to_dict()``
as the detail; malformed request bodies are rejected by FastAPI with 422.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from config.settings import settings
from src.models.analysis import ConversationMessage, IncidentContext
from src.models.coach import CoachTurn
from src.models.fir import IncidentData
from src.services.analyzer import IncidentAnalyzer
from src.services.exceptions import TriageError, ValidationError
from src.services.fir_generator import FIRGeneratorService
from src.services.safety_coach import SafetyCoachService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])

S = TypeVar("S")

_REQUEST_CONFIG = {"populate_by_name": True, "alias_generator": to_camel}


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class AnalyzeRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    message: str | None = Field(default=None, max_length=settings.max_message_length)
    context: IncidentContext | None = None


class ConversationRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    messages: list[ConversationMessage] | None = Field(
        default=None, max_length=settings.max_conversation_messages,
    )


class CoachRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    question: str | None = Field(default=None, max_length=settings.max_message_length)
    conversation_history: list[CoachTurn] = Field(default_factory=list)


class FIRRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    incident_data: IncidentData | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _service(request: Request, name: str, factory: Callable[[], S]) -> S:
    """Service from ``app.state``, or a default instance when the lifespan did not run."""
    service = getattr(request.app.state, name, None)
    if service is None:
        service = factory()
    return service


def _bad_request(exc: TriageError, endpoint: str) -> HTTPException:
    logger.info("api.ai.rejected", endpoint=endpoint, code=exc.code)
    return HTTPException(status_code=400, detail=exc.to_dict())


def _ok(data: Any) -> dict:
    return {"success": True, "data": data}


def _dump(model: BaseModel) -> dict:
    return model.model_dump(mode="json", by_alias=True)


def _require_incident(body: FIRRequest) -> IncidentData:
    if body.incident_data is None:
        raise ValidationError("incident_data", "Incident data is required")
    description = body.incident_data.description or ""
    if len(description) > settings.max_description_length:
        raise ValidationError(
            "description",
            f"Description exceeds {settings.max_description_length} characters",
        )
    return body.incident_data


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/analyze")
async def analyze(body: AnalyzeRequest, request: Request) -> dict:
    """Classify a single incident message."""
    analyzer = _service(request, "analyzer", IncidentAnalyzer)
    try:
        result = analyzer.analyze(body.message, body.context)
    except ValidationError as exc:
        raise _bad_request(exc, "analyze") from exc
    return _ok(_dump(result))


@router.post("/analyze-conversation")
async def analyze_conversation(body: ConversationRequest, request: Request) -> dict:
    """Score every message and return the conversation verdict."""
    analyzer = _service(request, "analyzer", IncidentAnalyzer)
    try:
        result = analyzer.analyze_conversation(body.messages)
    except ValidationError as exc:
        raise _bad_request(exc, "analyze_conversation") from exc
    return _ok(_dump(result))


@router.post("/coach")
async def coach(body: CoachRequest, request: Request) -> dict:
    """Chat with the safety coach.

    CALL 112 (UNIVERSAL EMERGENCY) IF IN IMMEDIATE DANGER.
    """
    safety_coach = _service(request, "safety_coach", SafetyCoachService)
    try:
        response = safety_coach.chat(body.question, body.conversation_history)
    except ValidationError as exc:
        raise _bad_request(exc, "coach") from exc
    return _ok(_dump(response))


@router.post("/generate-fir")
async def generate_fir(body: FIRRequest, request: Request) -> dict:
    """Draft an FIR from incident details."""
    fir_generator = _service(request, "fir_generator", FIRGeneratorService)
    try:
        record = fir_generator.generate(_require_incident(body))
    except ValidationError as exc:
        raise _bad_request(exc, "generate_fir") from exc
    return _ok(_dump(record))


@router.post("/fir-document")
async def fir_document(body: FIRRequest, request: Request) -> dict:
    """Draft an FIR and render it as a plain-text document."""
    fir_generator = _service(request, "fir_generator", FIRGeneratorService)
    try:
        record = fir_generator.generate(_require_incident(body))
    except ValidationError as exc:
        raise _bad_request(exc, "fir_document") from exc
    return _ok({
        "record": _dump(record),
        "document": fir_generator.render_document(record),
    })
