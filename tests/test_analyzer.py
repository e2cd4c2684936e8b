"""Tests for single-message analysis and conversation aggregation."""

from __future__ import annotations

import random
from datetime import UTC, datetime

import pytest

from src.models.analysis import (
    AnalysisResult,
    ConversationMessage,
    ConversationResult,
    IncidentContext,
)
from src.models.enums import Severity
from src.services.analyzer import IncidentAnalyzer, aggregate
from src.services.exceptions import ValidationError
from src.services.randomness import RandomSource

FIXED_NOW = datetime(2026, 3, 5, 21, 30, tzinfo=UTC)


@pytest.fixture
def analyzer() -> IncidentAnalyzer:
    return IncidentAnalyzer(random_source=RandomSource(random.Random(1), clock=lambda: FIXED_NOW))


def _result(severity: Severity, *risks: str) -> AnalysisResult:
    return AnalysisResult(severity=severity, confidence=0.5, risk_factors=list(risks))


# -----------------------------------------------------------------------
# analyze
# -----------------------------------------------------------------------


class TestAnalyze:
    def test_knife_attack(self, analyzer: IncidentAnalyzer) -> None:
        result = analyzer.analyze("Someone is attacking me with a knife! Help!")
        assert result.severity is Severity.HIGH
        assert "knife" in result.risk_factors
        assert "immediate_action_required" in result.evidence_labels
        assert result.recommendations[0] == "Contact emergency services immediately (112/100)"

    def test_lewd_comments_by_day(self, analyzer: IncidentAnalyzer) -> None:
        result = analyzer.analyze(
            "A stranger touched me inappropriately and made lewd comments",
            IncidentContext(is_night=False),
        )
        assert result.severity is Severity.MEDIUM
        assert {"touched", "lewd"} <= set(result.risk_factors)
        assert "physical_incident" in result.evidence_labels
        assert "verbal_harassment" in result.evidence_labels

    def test_matching_ignores_case(self, analyzer: IncidentAnalyzer) -> None:
        assert analyzer.analyze("HE HAD A GUN").severity is Severity.HIGH

    def test_generated_at_uses_injected_clock(self, analyzer: IncidentAnalyzer) -> None:
        assert analyzer.analyze("good morning").generated_at == FIXED_NOW

    @pytest.mark.parametrize("text", [None, "", "   \n"])
    def test_blank_message_is_rejected(self, analyzer: IncidentAnalyzer, text: str | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            analyzer.analyze(text)
        assert exc_info.value.field == "text"
        assert exc_info.value.message == "Message is required"


# -----------------------------------------------------------------------
# analyze_conversation
# -----------------------------------------------------------------------


class TestAnalyzeConversation:
    def test_overall_is_maximum_tier(self, analyzer: IncidentAnalyzer) -> None:
        result = analyzer.analyze_conversation([
            ConversationMessage(text="I have a question about my commute"),
            ConversationMessage(text="A stranger was following me"),
            ConversationMessage(text="Thanks for the advice"),
        ])
        assert result.overall_severity is Severity.MEDIUM
        assert result.total_risks == ["following", "stranger"]
        assert result.message_count == 3

    def test_every_message_is_scored_after_high(self, analyzer: IncidentAnalyzer) -> None:
        result = analyzer.analyze_conversation([
            ConversationMessage(text="He had a knife"),
            ConversationMessage(text="Now a stranger is stalking me"),
        ])
        assert result.overall_severity is Severity.HIGH
        assert result.total_risks == ["knife", "stalking", "stranger"]

    def test_per_message_context(self, analyzer: IncidentAnalyzer) -> None:
        result = analyzer.analyze_conversation([
            ConversationMessage(text="I felt uncomfortable", context=IncidentContext(is_night=True)),
        ])
        assert result.overall_severity is Severity.MEDIUM

    @pytest.mark.parametrize("messages", [None, []])
    def test_empty_conversation_is_rejected(self, analyzer: IncidentAnalyzer, messages) -> None:
        with pytest.raises(ValidationError, match="Messages array is required"):
            analyzer.analyze_conversation(messages)

    def test_blank_message_reports_index(self, analyzer: IncidentAnalyzer) -> None:
        with pytest.raises(ValidationError) as exc_info:
            analyzer.analyze_conversation([
                ConversationMessage(text="hello"),
                ConversationMessage(text="  "),
            ])
        assert exc_info.value.details["index"] == 1


# -----------------------------------------------------------------------
# aggregate
# -----------------------------------------------------------------------


class TestAggregate:
    def test_empty_fold(self) -> None:
        assert aggregate([]) == ConversationResult()

    def test_order_does_not_change_verdict(self) -> None:
        results = [
            _result(Severity.LOW),
            _result(Severity.HIGH, "knife"),
            _result(Severity.MEDIUM, "dark", "alone"),
        ]
        forward = aggregate(results)
        backward = aggregate(reversed(results))
        assert forward.overall_severity is backward.overall_severity is Severity.HIGH
        assert set(forward.total_risks) == set(backward.total_risks) == {"knife", "dark", "alone"}

    def test_never_regresses(self) -> None:
        result = aggregate([_result(Severity.MEDIUM), _result(Severity.LOW), _result(Severity.LOW)])
        assert result.overall_severity is Severity.MEDIUM

    def test_risks_are_unioned_without_duplicates(self) -> None:
        result = aggregate([_result(Severity.MEDIUM, "dark"), _result(Severity.MEDIUM, "dark", "alone")])
        assert result.total_risks == ["dark", "alone"]
