# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Built-in owner-ID patterns.

Operations on principal-owned tables must be scoped to an owner. Two
patterns enforce this:

    - builtin:owner_id_filter (ERROR): filter-scoped operations (select,
      join, update, delete, transaction) must filter on at least one
      owner key; inserts must carry one in their payload.
    - builtin:owner_id_reassignment (WARNING): updates whose payload sets
      an owner key. Ownership transfer should be its own reviewed
      operation.

Only presence is checked. Binding the owner key to the caller's identity
is the job of the persistence adapter that executes the query.
"""

from __future__ import annotations

from intentguard.constants import (
    OWNER_ID_FILTER_PATTERN_ID,
    OWNER_ID_REASSIGNMENT_PATTERN_ID,
)
from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.enums.enum_query_operation import EnumQueryOperation
from intentguard.models.model_builtin_config import ModelOwnerIdConfig
from intentguard.models.model_intent import ModelIntent, ModelQueryIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
)


class OwnerIdFilterEvaluator:
    """Checks that an owned-table operation is scoped to an owner key."""

    def __init__(self, config: ModelOwnerIdConfig) -> None:
        self._config = config

    def owned_tables(self, intent: ModelQueryIntent) -> list[str]:
        return [t for t in intent.normalized_tables if t in self._config.owned_tables]

    def applies(self, intent: ModelIntent, context: ModelIntentContext) -> bool:
        return isinstance(intent, ModelQueryIntent) and bool(self.owned_tables(intent))

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> ModelPatternEvaluation:
        if not isinstance(intent, ModelQueryIntent):
            raise TypeError("owner-ID checks require a query intent")
        if intent.operation.is_filter_scoped:
            source, fields = "filters", intent.filters
        else:
            source, fields = "data", intent.data
        present = [key for key in self._config.owner_keys if key in fields]
        details = {
            "operation": intent.operation.value,
            "tables": self.owned_tables(intent),
            "checked": source,
            "owner_keys": list(self._config.owner_keys),
        }
        if present:
            return ModelPatternEvaluation(
                valid=True, details={**details, "owner_keys_present": present}
            )
        where = "payload" if source == "data" else "filters"
        return ModelPatternEvaluation(
            valid=False,
            message=(
                f"{intent.operation.value} on owned table(s) "
                f"{', '.join(details['tables'])} must include an owner key "
                f"({', '.join(self._config.owner_keys)}) in its {where}"
            ),
            details=details,
        )


class OwnerIdReassignmentEvaluator:
    """Flags updates that write to an owner-key column."""

    def __init__(self, config: ModelOwnerIdConfig) -> None:
        self._config = config
        self._filter = OwnerIdFilterEvaluator(config)

    def applies(self, intent: ModelIntent, context: ModelIntentContext) -> bool:
        return (
            self._filter.applies(intent, context)
            and isinstance(intent, ModelQueryIntent)
            and intent.operation is EnumQueryOperation.UPDATE
        )

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> ModelPatternEvaluation:
        if not isinstance(intent, ModelQueryIntent):
            raise TypeError("owner-ID checks require a query intent")
        modified = [key for key in self._config.owner_keys if key in intent.data]
        if not modified:
            return ModelPatternEvaluation(valid=True)
        return ModelPatternEvaluation(
            valid=False,
            message=(
                f"Update attempts to modify owner field(s) {', '.join(modified)}; "
                "ownership reassignment requires a dedicated operation"
            ),
            details={"modified_owner_keys": modified},
        )


def create_owner_id_patterns(
    config: ModelOwnerIdConfig | None = None,
    *,
    enabled: bool = True,
) -> list[ModelPatternDefinition]:
    """Build the two protected owner-ID pattern definitions."""
    config = config or ModelOwnerIdConfig()
    filter_evaluator = OwnerIdFilterEvaluator(config)
    reassignment_evaluator = OwnerIdReassignmentEvaluator(config)
    return [
        ModelPatternDefinition(
            id=OWNER_ID_FILTER_PATTERN_ID,
            name="Owner ID Filter",
            description=(
                "Operations on principal-owned tables must be scoped by an "
                "owner key"
            ),
            severity=EnumPatternSeverity.ERROR,
            evaluator=filter_evaluator,
            applies_to=filter_evaluator.applies,
            violation_message="Operation on owned data is missing an owner key",
            enabled=enabled,
            protected=True,
        ),
        ModelPatternDefinition(
            id=OWNER_ID_REASSIGNMENT_PATTERN_ID,
            name="Owner ID Reassignment",
            description="Updates should not modify owner-key fields",
            severity=EnumPatternSeverity.WARNING,
            evaluator=reassignment_evaluator,
            applies_to=reassignment_evaluator.applies,
            violation_message="Update modifies an owner-key field",
            enabled=enabled,
            protected=True,
        ),
    ]


__all__ = [
    "OwnerIdFilterEvaluator",
    "OwnerIdReassignmentEvaluator",
    "create_owner_id_patterns",
]
