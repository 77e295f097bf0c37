# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Declarative pattern kinds.

Patterns loaded from configuration files cannot carry code, so they are
described by a small closed set of kinds and turned into evaluators here:

    - required_fields: every listed param must be present on the intent
    - numeric_range: a param, when present, must be a number within bounds

YAML example::

    patterns:
      - kind: numeric_range
        id: max-bid-amount
        name: Max Bid Amount
        severity: error
        intent_names: [submitBid]
        field: amount
        max: 10000
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.models.model_intent import ModelIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
)


class _ModelPatternSpecBase(BaseModel):
    """Fields shared by all declarative pattern kinds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Unique pattern identifier")
    name: str = Field(..., min_length=1, description="Human-readable name")
    description: str = Field(default="")
    severity: EnumPatternSeverity = Field(default=EnumPatternSeverity.ERROR)
    enabled: bool = Field(default=True)
    domains: frozenset[str] = Field(
        default_factory=frozenset,
        description="Domains the pattern applies to (empty means all)",
    )
    intent_names: frozenset[str] = Field(
        default_factory=frozenset,
        description="Intent names the pattern applies to (empty means all)",
    )
    violation_message: str | None = Field(default=None)


class ModelRequiredFieldsSpec(_ModelPatternSpecBase):
    """Requires a set of params to be present on the intent."""

    kind: Literal["required_fields"] = "required_fields"
    fields: tuple[str, ...] = Field(..., min_length=1)


class ModelNumericRangeSpec(_ModelPatternSpecBase):
    """Bounds a numeric param. Absent params pass (partial updates)."""

    kind: Literal["numeric_range"] = "numeric_range"
    field: str = Field(..., min_length=1)
    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> ModelNumericRangeSpec:
        if self.min is None and self.max is None:
            raise ValueError("numeric_range requires at least one of min or max")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


ModelPatternSpec = Annotated[
    ModelRequiredFieldsSpec | ModelNumericRangeSpec,
    Field(discriminator="kind"),
]


class RequiredFieldsEvaluator:
    """Fails when any of the configured params is missing."""

    def __init__(self, fields: tuple[str, ...]) -> None:
        self._fields = fields

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> ModelPatternEvaluation:
        missing = [f for f in self._fields if f not in intent.params]
        return ModelPatternEvaluation(
            valid=not missing,
            message=(
                f"Missing required fields: {', '.join(missing)}" if missing else None
            ),
            details={"missing_fields": missing},
        )


class NumericRangeEvaluator:
    """Fails when a present param is not a number within [min, max]."""

    def __init__(
        self,
        field: str,
        minimum: float | None = None,
        maximum: float | None = None,
        label: str | None = None,
    ) -> None:
        self._field = field
        self._min = minimum
        self._max = maximum
        self._label = label or field

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> ModelPatternEvaluation:
        if self._field not in intent.params:
            return ModelPatternEvaluation(valid=True)
        raw = intent.params[self._field]
        value = _to_number(raw)
        if value is None:
            return ModelPatternEvaluation(
                valid=False,
                message=f"{self._label} must be a number",
                details={"field": self._field, "value": raw},
            )
        details = {"field": self._field, "value": value, "min": self._min, "max": self._max}
        if self._min is not None and value < self._min:
            return ModelPatternEvaluation(
                valid=False,
                message=f"{self._label} must be at least {_fmt(self._min)}",
                details=details,
            )
        if self._max is not None and value > self._max:
            return ModelPatternEvaluation(
                valid=False,
                message=f"{self._label} cannot exceed {_fmt(self._max)}",
                details=details,
            )
        return ModelPatternEvaluation(valid=True, details=details)


def _to_number(raw: object) -> float | None:
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return None if math.isnan(value) else value


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def build_pattern(
    spec: ModelRequiredFieldsSpec | ModelNumericRangeSpec,
) -> ModelPatternDefinition:
    """Turn a declarative pattern entry into a registrable definition."""
    if isinstance(spec, ModelRequiredFieldsSpec):
        evaluator: RequiredFieldsEvaluator | NumericRangeEvaluator = (
            RequiredFieldsEvaluator(spec.fields)
        )
        default_message = "Intent is missing required fields"
    else:
        evaluator = NumericRangeEvaluator(spec.field, spec.min, spec.max)
        default_message = f"{spec.field} is out of range"
    return ModelPatternDefinition(
        id=spec.id,
        name=spec.name,
        description=spec.description,
        severity=spec.severity,
        evaluator=evaluator,
        violation_message=spec.violation_message or default_message,
        applicable_domains=spec.domains,
        applicable_intent_names=spec.intent_names,
        enabled=spec.enabled,
    )


__all__ = [
    "ModelNumericRangeSpec",
    "ModelPatternSpec",
    "ModelRequiredFieldsSpec",
    "NumericRangeEvaluator",
    "RequiredFieldsEvaluator",
    "build_pattern",
]
