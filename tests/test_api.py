"""Tests for the GuardHer HTTP endpoints."""

from __future__ import annotations

import logging

import pytest
import structlog
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create a test client without running the lifespan.

    Routes fall back to default service instances when ``app.state`` is empty.
    """
    from src.main import app

    return TestClient(app)


# -----------------------------------------------------------------------
# Analysis
# -----------------------------------------------------------------------


class TestAnalyzeEndpoints:
    def test_analyze(self, client) -> None:
        response = client.post(
            "/api/v1/ai/analyze",
            json={"message": "Someone is attacking me with a knife! Help!"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["severity"] == "HIGH"
        assert "immediate_action_required" in body["data"]["evidenceLabels"]

    def test_analyze_with_camel_case_context(self, client) -> None:
        response = client.post(
            "/api/v1/ai/analyze",
            json={"message": "I felt uncomfortable", "context": {"isNight": True}},
        )
        assert response.json()["data"]["severity"] == "MEDIUM"

    def test_blank_message_is_400(self, client) -> None:
        response = client.post("/api/v1/ai/analyze", json={"message": "  "})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_ERROR"
        assert detail["message"] == "Message is required"

    def test_conversation(self, client) -> None:
        response = client.post(
            "/api/v1/ai/analyze-conversation",
            json={"messages": [
                {"text": "I have a question"},
                {"text": "A stranger was following me"},
                {"text": "Thanks"},
            ]},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["overallSeverity"] == "MEDIUM"
        assert data["messageCount"] == 3

    def test_empty_conversation_is_400(self, client) -> None:
        response = client.post("/api/v1/ai/analyze-conversation", json={"messages": []})
        assert response.status_code == 400

    def test_conversation_over_cap_is_422(self, client) -> None:
        messages = [{"text": f"message {i}"} for i in range(11)]
        response = client.post("/api/v1/ai/analyze-conversation", json={"messages": messages})
        assert response.status_code == 422


# -----------------------------------------------------------------------
# Coach
# -----------------------------------------------------------------------


class TestCoachEndpoint:
    def test_emergency(self, client) -> None:
        response = client.post("/api/v1/ai/coach", json={"question": "help me"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["isEmergency"] is True
        assert data["severity"] == "HIGH"
        assert data["conversationId"].startswith("coach-")

    def test_with_history(self, client) -> None:
        response = client.post(
            "/api/v1/ai/coach",
            json={
                "question": "Someone keeps following me",
                "conversationHistory": [{"role": "user", "text": "hi"}],
            },
        )
        assert response.json()["data"]["topic"] == "stalking"

    def test_history_with_assistant_role(self, client) -> None:
        response = client.post(
            "/api/v1/ai/coach",
            json={
                "question": "Someone keeps following me",
                "conversationHistory": [{"role": "assistant", "text": "hi"}],
            },
        )
        assert response.status_code == 200
        assert response.json()["data"]["topic"] == "stalking"

    def test_missing_question_is_400(self, client) -> None:
        response = client.post("/api/v1/ai/coach", json={})
        assert response.status_code == 400
        assert response.json()["detail"]["details"]["field"] == "question"


# -----------------------------------------------------------------------
# FIR
# -----------------------------------------------------------------------


class TestFIREndpoints:
    def test_generate_fir(self, client) -> None:
        response = client.post(
            "/api/v1/ai/generate-fir",
            json={"incidentData": {"description": "He followed me and grabbed my arm"}},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["reportNumber"].startswith("FIR-")
        assert data["status"] == "DRAFT"
        assert data["incident"]["type"] == "Stalking"
        assert data["complainant"]["name"] == "[Name]"

    def test_missing_incident_data_is_400(self, client) -> None:
        response = client.post("/api/v1/ai/generate-fir", json={})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"

    def test_missing_description_is_400(self, client) -> None:
        response = client.post("/api/v1/ai/generate-fir", json={"incidentData": {"name": "Asha"}})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "MISSING_FIELD"

    def test_fir_document(self, client) -> None:
        response = client.post(
            "/api/v1/ai/fir-document",
            json={"incidentData": {"description": "He followed me", "location": "Park Street"}},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        document = data["document"]
        assert "FIRST INFORMATION REPORT (FIR)" in document
        assert f"Report Number: {data['record']['reportNumber']}" in document
        assert "Location: Park Street" in document


# -----------------------------------------------------------------------
# Health and info
# -----------------------------------------------------------------------


def test_health(client) -> None:
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_after_startup() -> None:
    from src.main import app

    with TestClient(app) as client:
        response = client.get("/api/v1/health/ready")
    assert response.json() == {
        "status": "ready",
        "checks": {"analyzer": "ok", "safety_coach": "ok", "fir_generator": "ok"},
    }


def test_api_info(client) -> None:
    body = client.get("/api").json()
    assert body["name"] == "GuardHer API"
    assert body["endpoints"]["coach"] == "/api/v1/ai/coach"


class TestLoggingSetup:
    @pytest.mark.parametrize(
        ("name", "level"),
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("Warning", logging.WARNING), ("verbose", logging.INFO)],
    )
    def test_level_names(self, name: str, level: int) -> None:
        from src.main import _log_level

        assert _log_level(name) == level

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configure_for_each_format(self, monkeypatch, log_format: str) -> None:
        from config.settings import settings
        from src.main import _configure_logging

        monkeypatch.setattr(settings, "log_level", "debug")
        monkeypatch.setattr(settings, "log_format", log_format)
        _configure_logging()
        assert structlog.is_configured()
        structlog.reset_defaults()
