"""GuardHer FastAPI application entry point.

Creates the FastAPI app, configures middleware, includes routers, and
builds the triage services (analyzer, safety coach, FIR generator) once
for the lifetime of the process.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from config.settings import settings
from src.api.router import api_router
from src.services.analyzer import IncidentAnalyzer
from src.services.evidence import EvidenceLabeler
from src.services.fir_generator import FIRGeneratorService
from src.services.lexicon import DEFAULT_LEXICON
from src.services.randomness import RandomSource
from src.services.safety_coach import SafetyCoachService
from src.services.severity import SeverityClassifier
from src.services.topic_router import TopicRouter

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------


def _log_level(name: str) -> int:
    """Numeric level for ``name``; unknown names fall back to INFO."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _render_chain(log_format: str) -> list:
    """Trailing processors: exceptions flattened for JSON, pretty for a TTY."""
    if log_format == "console":
        return [structlog.dev.ConsoleRenderer()]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def _configure_logging() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *_render_chain(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_log_level(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Application lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the triage services and store them on ``app.state``.

    All services share one lexicon and one ``RandomSource``. None of them
    hold connections, so shutdown only logs.
    """
    _configure_logging()
    logger.info("app.startup", env=settings.env, log_format=settings.log_format)

    app.state.start_time = time.time()

    random_source = RandomSource()
    classifier = SeverityClassifier(DEFAULT_LEXICON)

    app.state.analyzer = IncidentAnalyzer(
        classifier=classifier,
        labeler=EvidenceLabeler(DEFAULT_LEXICON),
        random_source=random_source,
    )
    logger.info("app.analyzer_initialised")

    app.state.safety_coach = SafetyCoachService(
        classifier=classifier,
        router=TopicRouter(DEFAULT_LEXICON),
        random_source=random_source,
        lexicon=DEFAULT_LEXICON,
    )
    logger.info("app.safety_coach_initialised")

    app.state.fir_generator = FIRGeneratorService(
        random_source=random_source,
        lexicon=DEFAULT_LEXICON,
    )
    logger.info("app.fir_generator_initialised")

    logger.info("app.startup_complete")

    yield

    logger.info("app.shutdown_complete")


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="GuardHer API",
    description=(
        "GuardHer incident triage and advisory service. Classifies incident "
        "severity, coaches users toward helplines and drafts FIR reports."
    ),
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
)

# Credentials are only allowed against the explicit production origin list.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.is_production,
    allow_methods=["GET", "POST"] if settings.is_production else ["GET", "POST", "OPTIONS", "HEAD"],
    allow_headers=["Content-Type", "Accept", "Authorization"],
)

app.include_router(api_router)


@app.get("/api", response_class=ORJSONResponse)
async def api_info() -> dict:
    return {
        "name": "GuardHer API",
        "description": "Incident triage and safety advisory for women's safety",
        "version": app.version,
        "docs": "/docs",
        "health": "/api/v1/health",
        "emergency_numbers": {"national_emergency": "112", "police": "100", "women_helpline": "1091"},
        "endpoints": {
            "analyze": "/api/v1/ai/analyze",
            "analyze_conversation": "/api/v1/ai/analyze-conversation",
            "coach": "/api/v1/ai/coach",
            "generate_fir": "/api/v1/ai/generate-fir",
            "fir_document": "/api/v1/ai/fir-document",
            "health": "/api/v1/health",
            "readiness": "/api/v1/health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.api_host, port=settings.api_port)
