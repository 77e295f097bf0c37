"""Unit tests for pattern definitions and validation results."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from pydantic import ValidationError

from intentguard.enums import EnumPatternSeverity
from intentguard.models import (
    ROLE_PERMISSION_OUTCOME_ID,
    ModelIntent,
    ModelIntentContext,
    ModelPatternDefinition,
    ModelPatternEvaluation,
    ModelPatternUpdate,
    ModelValidationOutcome,
    ModelValidationResult,
)

pytestmark = pytest.mark.unit


def _make_outcome(
    pattern_id: str = "p1",
    severity: EnumPatternSeverity = EnumPatternSeverity.ERROR,
    valid: bool = False,
    message: str | None = "violated",
) -> ModelValidationOutcome:
    """Helper to create test outcomes."""
    return ModelValidationOutcome(
        pattern_id=pattern_id,
        pattern_name=f"Pattern {pattern_id}",
        severity=severity,
        valid=valid,
        message=None if valid else message,
    )


class TestModelPatternEvaluation:
    def test_coerce_bool(self) -> None:
        assert ModelPatternEvaluation.coerce(True).valid is True
        assert ModelPatternEvaluation.coerce(False).valid is False

    def test_coerce_mapping(self) -> None:
        evaluation = ModelPatternEvaluation.coerce({"valid": False, "message": "no"})
        assert evaluation.valid is False
        assert evaluation.message == "no"

    def test_coerce_passes_model_through(self) -> None:
        evaluation = ModelPatternEvaluation(valid=True)
        assert ModelPatternEvaluation.coerce(evaluation) is evaluation

    def test_coerce_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="NoneType"):
            ModelPatternEvaluation.coerce(None)


class TestModelPatternDefinition:
    def test_defaults(self, make_pattern: Callable[..., ModelPatternDefinition]) -> None:
        pattern = make_pattern()
        assert pattern.severity is EnumPatternSeverity.ERROR
        assert pattern.enabled is True
        assert pattern.protected is False
        assert pattern.violation_message == "Pattern violated"

    def test_evaluator_must_be_callable(self) -> None:
        with pytest.raises(ValidationError):
            ModelPatternDefinition(id="p1", name="P1", evaluator="not callable")  # type: ignore[arg-type]

    def test_id_must_not_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            ModelPatternDefinition(id="", name="P1", evaluator=lambda i, c: True)

    def test_matches_domain_filter(
        self,
        make_pattern: Callable[..., ModelPatternDefinition],
        make_intent: Callable[..., ModelIntent],
    ) -> None:
        pattern = make_pattern(applicable_domains=frozenset({"bidding"}))
        intent = make_intent()
        assert pattern.matches(intent, ModelIntentContext(current_domain="bidding"))
        assert not pattern.matches(intent, ModelIntentContext(current_domain="payment"))

    def test_matches_intent_name_filter(
        self,
        make_pattern: Callable[..., ModelPatternDefinition],
        make_intent: Callable[..., ModelIntent],
        bidding_context: ModelIntentContext,
    ) -> None:
        pattern = make_pattern(applicable_intent_names=frozenset({"submitBid"}))
        assert pattern.matches(make_intent("submitBid"), bidding_context)
        assert not pattern.matches(make_intent("getBid"), bidding_context)

    def test_disabled_never_matches(
        self,
        make_pattern: Callable[..., ModelPatternDefinition],
        make_intent: Callable[..., ModelIntent],
        bidding_context: ModelIntentContext,
    ) -> None:
        assert not make_pattern(enabled=False).matches(make_intent(), bidding_context)


class TestModelPatternUpdate:
    def test_changes_only_contains_set_fields(self) -> None:
        update = ModelPatternUpdate(enabled=False)
        assert update.changes() == {"enabled": False}

    def test_explicit_none_is_a_change(self) -> None:
        update = ModelPatternUpdate(applies_to=None)
        assert update.changes() == {"applies_to": None}

    def test_rejects_id_changes(self) -> None:
        with pytest.raises(ValidationError):
            ModelPatternUpdate.model_validate({"id": "other"})


class TestModelValidationResult:
    def test_empty_is_valid(self) -> None:
        result = ModelValidationResult.from_outcomes([])
        assert result.valid is True
        assert result.outcomes == ()

    def test_error_failure_invalidates(self) -> None:
        result = ModelValidationResult.from_outcomes([_make_outcome()])
        assert result.valid is False
        assert len(result.errors) == 1

    @pytest.mark.parametrize(
        "severity", [EnumPatternSeverity.WARNING, EnumPatternSeverity.INFO]
    )
    def test_non_error_failure_keeps_valid(self, severity: EnumPatternSeverity) -> None:
        result = ModelValidationResult.from_outcomes([_make_outcome(severity=severity)])
        assert result.valid is True
        assert len(result.failed_outcomes) == 1

    def test_passing_error_outcome_keeps_valid(self) -> None:
        result = ModelValidationResult.from_outcomes([_make_outcome(valid=True)])
        assert result.valid is True
        assert result.errors == []

    def test_severity_buckets(self) -> None:
        result = ModelValidationResult.from_outcomes(
            [
                _make_outcome("e"),
                _make_outcome("w", EnumPatternSeverity.WARNING),
                _make_outcome("i", EnumPatternSeverity.INFO),
                _make_outcome("ok", valid=True),
            ]
        )
        assert [o.pattern_id for o in result.errors] == ["e"]
        assert [o.pattern_id for o in result.warnings] == ["w"]
        assert [o.pattern_id for o in result.infos] == ["i"]

    def test_intent_summary(self, make_intent: Callable[..., ModelIntent]) -> None:
        intent = make_intent()
        result = ModelValidationResult.passed(intent)
        assert result.intent_summary is not None
        assert result.intent_summary.name == "submitBid"
        assert result.intent_summary.domain == "bidding"
        assert result.intent_summary.timestamp == intent.timestamp
        assert result.intent_summary.correlation_id == intent.correlation_id

    def test_permission_denied_flag(self) -> None:
        denied = ModelValidationResult.from_outcomes(
            [_make_outcome(ROLE_PERMISSION_OUTCOME_ID)]
        )
        assert denied.is_permission_denied
        assert not ModelValidationResult.from_outcomes([_make_outcome()]).is_permission_denied

    def test_merge_concatenates(self) -> None:
        first = ModelValidationResult.from_outcomes([_make_outcome("a", valid=True)])
        second = ModelValidationResult.from_outcomes([_make_outcome("b")])
        merged = first.merge(second)
        assert merged.valid is False
        assert [o.pattern_id for o in merged.outcomes] == ["a", "b"]

    def test_format_summary(self, make_intent: Callable[..., ModelIntent]) -> None:
        result = ModelValidationResult.from_outcomes(
            [
                _make_outcome("amount", message="Bid amount cannot exceed 10000"),
                _make_outcome("domain", EnumPatternSeverity.WARNING, message="crossed"),
            ],
            make_intent(),
        )
        assert result.format_summary() == (
            "submitBid rejected: 1 error, 1 warning "
            "(amount: Bid amount cannot exceed 10000; domain: crossed)"
        )

    def test_format_summary_accepted(self, make_intent: Callable[..., ModelIntent]) -> None:
        assert ModelValidationResult.passed(make_intent()).format_summary() == (
            "submitBid accepted"
        )

    def test_direct_construction_rejects_contradictory_verdict(self) -> None:
        with pytest.raises(ValidationError, match="contradicts outcomes"):
            ModelValidationResult(valid=True, outcomes=(_make_outcome(),))
        with pytest.raises(ValidationError, match="contradicts outcomes"):
            ModelValidationResult(valid=False, outcomes=())

    def test_direct_construction_with_consistent_verdict(self) -> None:
        result = ModelValidationResult(
            valid=True,
            outcomes=(_make_outcome(severity=EnumPatternSeverity.WARNING),),
        )
        assert result.valid is True
