# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern definition models for IntentGuard.

A pattern is a named, severity-tagged rule with applicability filters and
an evaluator. Evaluators follow ProtocolPatternEvaluator: they receive the
intent and its context and return a ModelPatternEvaluation, either
directly or as an awaitable. Mappings with the same keys and bare bools
are accepted and coerced.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.models.model_intent import ModelIntent
from intentguard.models.model_intent_context import ModelIntentContext


class ModelPatternEvaluation(BaseModel):
    """Result of evaluating a single pattern against an intent.

    Attributes:
        valid: Whether the intent satisfies the pattern.
        message: Custom message overriding the pattern's violation message.
        details: Additional structured context about the evaluation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    valid: bool = Field(..., description="Whether the pattern is satisfied")
    message: str | None = Field(default=None, description="Custom result message")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional evaluation context"
    )

    @classmethod
    def coerce(cls, raw: object) -> ModelPatternEvaluation:
        """Normalize an evaluator return value.

        Raises:
            TypeError: If the value is not an evaluation, mapping or bool.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            return cls(valid=raw)
        if isinstance(raw, Mapping):
            return cls.model_validate(dict(raw))
        raise TypeError(
            f"Pattern evaluator returned {type(raw).__name__}; expected "
            "ModelPatternEvaluation, mapping or bool"
        )


PatternEvaluator = Callable[[ModelIntent, ModelIntentContext], Any]
PatternApplicability = Callable[[ModelIntent, ModelIntentContext], bool]


class ModelPatternDefinition(BaseModel):
    """A registered architectural pattern.

    Attributes:
        id: Unique key within a registry.
        name: Human-readable name.
        description: What the pattern enforces.
        severity: How a violation affects the aggregate verdict.
        evaluator: Callable returning the evaluation (sync or async).
        violation_message: Default message when the evaluator gives none.
        applicable_domains: Domains the pattern applies to (empty = all).
        applicable_intent_names: Intent names it applies to (empty = all).
        enabled: Whether the pattern participates in validation.
        applies_to: Optional predicate narrowing applicability further.
        protected: Built-in entries that cannot be updated or removed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Unique pattern identifier")
    name: str = Field(..., min_length=1, description="Human-readable name")
    description: str = Field(default="", description="What the pattern enforces")
    severity: EnumPatternSeverity = Field(
        default=EnumPatternSeverity.ERROR,
        description="Severity level of violations",
    )
    evaluator: PatternEvaluator = Field(
        ..., description="Evaluates whether an intent complies"
    )
    violation_message: str = Field(
        default="Pattern violated",
        description="Message used when the evaluator supplies none",
    )
    applicable_domains: frozenset[str] = Field(
        default_factory=frozenset,
        description="Domains this pattern applies to (empty means all)",
    )
    applicable_intent_names: frozenset[str] = Field(
        default_factory=frozenset,
        description="Intent names this pattern applies to (empty means all)",
    )
    enabled: bool = Field(default=True, description="Whether the pattern is active")
    applies_to: PatternApplicability | None = Field(
        default=None,
        description="Additional applicability predicate",
    )
    protected: bool = Field(
        default=False,
        description="Built-in pattern that cannot be updated or unregistered",
    )

    def matches(self, intent: ModelIntent, context: ModelIntentContext) -> bool:
        """Return True if the static filters select this intent.

        The ``applies_to`` predicate is not consulted here; the registry
        runs it inside the fault-handling path.
        """
        if not self.enabled:
            return False
        if self.applicable_domains and context.current_domain not in self.applicable_domains:
            return False
        if (
            self.applicable_intent_names
            and intent.name not in self.applicable_intent_names
        ):
            return False
        return True


class ModelPatternUpdate(BaseModel):
    """Partial update for a registered pattern.

    Only fields explicitly set are merged into the stored definition.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    description: str | None = None
    severity: EnumPatternSeverity | None = None
    evaluator: PatternEvaluator | None = None
    violation_message: str | None = None
    applicable_domains: frozenset[str] | None = None
    applicable_intent_names: frozenset[str] | None = None
    enabled: bool | None = None
    applies_to: PatternApplicability | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller provided."""
        return {
            key: getattr(self, key)
            for key in self.model_fields_set
        }


__all__ = [
    "ModelPatternDefinition",
    "ModelPatternEvaluation",
    "ModelPatternUpdate",
    "PatternApplicability",
    "PatternEvaluator",
]
