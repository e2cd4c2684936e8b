"""Main API router combining all v1 route modules.

Aggregates the routers under the ``/api/v1`` prefix so the FastAPI
application only needs to include a single router.

Includes:
    * AI: message and conversation triage, safety coach, FIR drafting
    * Health: liveness and readiness checks
"""

from __future__ import annotations

from fastapi import APIRouter

from src.api.v1 import ai, health

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(ai.router)
api_router.include_router(health.router)
