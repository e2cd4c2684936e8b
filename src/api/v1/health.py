"""Liveness and readiness checks for GuardHer API v1."""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Request
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

# app.state attributes the lifespan must populate before traffic is routed here
_TRIAGE_SERVICES: tuple[str, ...] = ("analyzer", "safety_coach", "fir_generator")


class LivenessStatus(BaseModel):
    status: str = "healthy"
    message: str = "AI Module is running"
    version: str
    uptime_seconds: float


class ReadinessStatus(BaseModel):
    """``ready`` only when every triage service is wired."""

    status: str
    checks: dict[str, str]


def _uptime(request: Request) -> float:
    started = getattr(request.app.state, "start_time", None)
    return 0.0 if started is None else round(time.time() - started, 2)


@router.get("", response_model=LivenessStatus)
async def liveness(request: Request) -> LivenessStatus:
    return LivenessStatus(version=request.app.version, uptime_seconds=_uptime(request))


@router.get("/ready", response_model=ReadinessStatus)
async def readiness(request: Request) -> ReadinessStatus:
    checks: dict[str, str] = {}
    for name in _TRIAGE_SERVICES:
        wired = getattr(request.app.state, name, None) is not None
        checks[name] = "ok" if wired else "not_initialised"

    status = "ready" if set(checks.values()) == {"ok"} else "degraded"
    logger.info("health.readiness_check", status=status, checks=checks)
    return ReadinessStatus(status=status, checks=checks)
