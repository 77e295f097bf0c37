# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation outcome and result models for IntentGuard.

ModelValidationResult is the sole return value of the guard. Its ``valid``
flag is a pure function of its outcomes: it is False if and only if at
least one ERROR-severity outcome failed. Use :meth:`from_outcomes` to build
instances so the flag can never disagree with the outcome list.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.models.model_intent import ModelIntent

# Outcome id used for the guard's role/permission decision.
ROLE_PERMISSION_OUTCOME_ID = "guard:role_permission"


class ModelValidationOutcome(BaseModel):
    """Result of one pattern (or the role check) for one intent.

    Attributes:
        pattern_id: ID of the pattern that produced this outcome.
        pattern_name: Human-readable pattern name.
        severity: Severity declared by the pattern.
        valid: Whether the pattern was satisfied.
        message: Violation message; absent when valid.
        details: Additional structured context.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern_id: str = Field(..., description="Pattern that produced the outcome")
    pattern_name: str = Field(..., description="Human-readable pattern name")
    severity: EnumPatternSeverity = Field(..., description="Declared severity")
    valid: bool = Field(..., description="Whether the pattern was satisfied")
    message: str | None = Field(default=None, description="Violation message")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional validation context"
    )

    @property
    def is_blocking_failure(self) -> bool:
        """Return True if this outcome makes the aggregate invalid."""
        return not self.valid and self.severity.is_blocking


class ModelIntentSummary(BaseModel):
    """Information about the intent a result refers to."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    domain: str | None = None
    timestamp: datetime
    correlation_id: str | None = None
    validated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_intent(cls, intent: ModelIntent) -> ModelIntentSummary:
        return cls(
            name=intent.name,
            domain=intent.source_domain or None,
            timestamp=intent.timestamp,
            correlation_id=intent.correlation_id,
        )


class ModelValidationResult(BaseModel):
    """Aggregate verdict for one intent.

    Attributes:
        valid: False iff an ERROR-severity outcome failed.
        outcomes: Per-pattern outcomes in evaluation (registration) order.
        intent_summary: Name, domain and timestamp of the validated intent.

    Example::

        result = ModelValidationResult.from_outcomes(outcomes, intent)
        if not result.valid:
            for outcome in result.errors:
                print(outcome.pattern_id, outcome.message)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: bool = Field(..., description="Overall validation status")
    outcomes: tuple[ModelValidationOutcome, ...] = Field(
        default=(),
        description="Outcomes in evaluation order",
    )
    intent_summary: ModelIntentSummary | None = Field(
        default=None,
        description="Information about the validated intent",
    )

    @model_validator(mode="after")
    def validate_verdict(self) -> ModelValidationResult:
        """Reject a ``valid`` flag that disagrees with the outcomes."""
        expected = not any(o.is_blocking_failure for o in self.outcomes)
        if self.valid != expected:
            raise ValueError(
                f"valid={self.valid} contradicts outcomes; an ERROR-severity "
                f"failure {'is' if not expected else 'is not'} present"
            )
        return self

    @classmethod
    def from_outcomes(
        cls,
        outcomes: list[ModelValidationOutcome] | tuple[ModelValidationOutcome, ...],
        intent: ModelIntent | None = None,
    ) -> ModelValidationResult:
        """Build a result whose ``valid`` flag is derived from the outcomes."""
        ordered = tuple(outcomes)
        return cls(
            valid=not any(o.is_blocking_failure for o in ordered),
            outcomes=ordered,
            intent_summary=(
                ModelIntentSummary.from_intent(intent) if intent is not None else None
            ),
        )

    @classmethod
    def passed(cls, intent: ModelIntent | None = None) -> ModelValidationResult:
        """Return a valid result with no outcomes."""
        return cls.from_outcomes((), intent)

    @property
    def failed_outcomes(self) -> list[ModelValidationOutcome]:
        return [o for o in self.outcomes if not o.valid]

    @property
    def errors(self) -> list[ModelValidationOutcome]:
        """Failed outcomes at ERROR severity."""
        return [o for o in self.failed_outcomes if o.severity == EnumPatternSeverity.ERROR]

    @property
    def warnings(self) -> list[ModelValidationOutcome]:
        """Failed outcomes at WARNING severity."""
        return [
            o for o in self.failed_outcomes if o.severity == EnumPatternSeverity.WARNING
        ]

    @property
    def infos(self) -> list[ModelValidationOutcome]:
        """Failed outcomes at INFO severity."""
        return [o for o in self.failed_outcomes if o.severity == EnumPatternSeverity.INFO]

    @property
    def is_permission_denied(self) -> bool:
        """Return True if the role check rejected the intent."""
        return any(
            o.pattern_id == ROLE_PERMISSION_OUTCOME_ID and not o.valid
            for o in self.outcomes
        )

    def merge(self, other: ModelValidationResult) -> ModelValidationResult:
        """Concatenate outcomes, keeping this result's intent summary."""
        return ModelValidationResult(
            valid=self.valid and other.valid,
            outcomes=self.outcomes + other.outcomes,
            intent_summary=self.intent_summary or other.intent_summary,
        )

    def format_summary(self) -> str:
        """Return a one-line human summary of the verdict.

        Example output::

            submitBid rejected: 1 error, 1 warning
            (bidding:valid_bid_amount: Bid amount cannot exceed $10000)
        """
        name = self.intent_summary.name if self.intent_summary else "intent"
        verdict = "accepted" if self.valid else "rejected"
        counts = ", ".join(
            f"{len(items)} {label}{'' if len(items) == 1 else 's'}"
            for label, items in (
                ("error", self.errors),
                ("warning", self.warnings),
                ("info", self.infos),
            )
            if items
        )
        summary = f"{name} {verdict}"
        if counts:
            summary = f"{summary}: {counts}"
        reasons = "; ".join(
            f"{o.pattern_id}: {o.message}" if o.message else o.pattern_id
            for o in self.failed_outcomes
        )
        if reasons:
            summary = f"{summary} ({reasons})"
        return summary


__all__ = [
    "ROLE_PERMISSION_OUTCOME_ID",
    "ModelIntentSummary",
    "ModelValidationOutcome",
    "ModelValidationResult",
]
