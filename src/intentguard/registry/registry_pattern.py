# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""In-memory pattern registry.

The registry owns the set of patterns a guard enforces and runs them
against intents. Validation semantics:

    1. Applicable set: enabled patterns whose domain and intent-name
       filters select the intent (and whose ``applies_to`` predicate, if
       any, returns True).
    2. Every applicable pattern is evaluated; evaluations run concurrently
       and outcomes are collected back in registration order.
    3. Evaluator faults and deadline overruns become failed outcomes at
       the pattern's own severity. Remaining patterns still run.
    4. The aggregate is invalid iff an ERROR-severity outcome failed.

Mutations are expected at startup or config reload. They take a lock;
``validate`` reads a snapshot taken under the same lock, so concurrent
validations never observe a half-applied mutation.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from intentguard.exceptions import (
    DuplicatePatternError,
    PatternNotFoundError,
    ProtectedPatternError,
)
from intentguard.models.model_intent import ModelIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
    ModelPatternUpdate,
)
from intentguard.models.model_validation_result import (
    ModelValidationOutcome,
    ModelValidationResult,
)

logger = logging.getLogger(__name__)

FAULT_MESSAGE_PREFIX = "Error validating pattern: "


class PatternRegistry:
    """Registry of architectural patterns keyed by id.

    Usage::

        registry = PatternRegistry()
        registry.register(
            ModelPatternDefinition(
                id="max-bid",
                name="Max bid",
                severity=EnumPatternSeverity.ERROR,
                applicable_intent_names=frozenset({"submitBid"}),
                evaluator=lambda intent, ctx: intent.params["amount"] <= 10_000,
            )
        )
        result = await registry.validate(intent, context)
    """

    def __init__(self, patterns: Iterable[ModelPatternDefinition] = ()) -> None:
        self._lock = threading.Lock()
        self._patterns: dict[str, ModelPatternDefinition] = {}
        for pattern in patterns:
            self.register(pattern)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def register(self, pattern: ModelPatternDefinition) -> None:
        """Register a new pattern.

        Raises:
            DuplicatePatternError: If a pattern with the same id exists.
        """
        with self._lock:
            if pattern.id in self._patterns:
                raise DuplicatePatternError(pattern.id)
            self._patterns[pattern.id] = pattern
        logger.debug(
            "Registered pattern. pattern_id=%s, severity=%s, enabled=%s",
            pattern.id,
            pattern.severity.value,
            pattern.enabled,
        )

    def update(
        self,
        pattern_id: str,
        updates: ModelPatternUpdate | Mapping[str, Any],
    ) -> ModelPatternDefinition:
        """Shallow-merge the provided fields into a registered pattern.

        Fields not present in ``updates`` are retained.

        Returns:
            The stored, updated definition.

        Raises:
            PatternNotFoundError: If no pattern has this id.
            ProtectedPatternError: If the pattern is a built-in.
            pydantic.ValidationError: If ``updates`` is an invalid mapping or
                the merged definition is invalid (e.g. ``name=None``).
        """
        if not isinstance(updates, ModelPatternUpdate):
            updates = ModelPatternUpdate.model_validate(dict(updates))
        with self._lock:
            current = self._patterns.get(pattern_id)
            if current is None:
                raise PatternNotFoundError(pattern_id)
            if current.protected:
                raise ProtectedPatternError(pattern_id)
            merged = ModelPatternDefinition.model_validate(
                {**current.model_dump(), **updates.changes()}
            )
            self._patterns[pattern_id] = merged
        logger.debug(
            "Updated pattern. pattern_id=%s, fields=%s",
            pattern_id,
            sorted(updates.model_fields_set),
        )
        return merged

    def unregister(self, pattern_id: str) -> bool:
        """Remove a pattern.

        Returns:
            True if the pattern existed and was removed, False otherwise.

        Raises:
            ProtectedPatternError: If the pattern is a built-in.
        """
        with self._lock:
            current = self._patterns.get(pattern_id)
            if current is None:
                return False
            if current.protected:
                raise ProtectedPatternError(pattern_id)
            del self._patterns[pattern_id]
        logger.debug("Unregistered pattern. pattern_id=%s", pattern_id)
        return True

    def enable(self, pattern_id: str) -> ModelPatternDefinition:
        """Set ``enabled`` on a registered pattern."""
        return self.update(pattern_id, ModelPatternUpdate(enabled=True))

    def disable(self, pattern_id: str) -> ModelPatternDefinition:
        """Clear ``enabled`` on a registered pattern."""
        return self.update(pattern_id, ModelPatternUpdate(enabled=False))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, pattern_id: str) -> ModelPatternDefinition | None:
        """Return the pattern with this id, or None."""
        return self._patterns.get(pattern_id)

    def list_patterns(self) -> list[ModelPatternDefinition]:
        """Return all patterns in registration order."""
        return list(self._snapshot())

    def get_applicable(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> list[ModelPatternDefinition]:
        """Return patterns whose static filters select the intent.

        ``applies_to`` predicates are evaluated during ``validate``.
        """
        return [p for p in self._snapshot() if p.matches(intent, context)]

    def _snapshot(self) -> tuple[ModelPatternDefinition, ...]:
        with self._lock:
            return tuple(self._patterns.values())

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    async def validate(
        self,
        intent: ModelIntent,
        context: ModelIntentContext,
        *,
        timeout_seconds: float | None = None,
    ) -> ModelValidationResult:
        """Validate an intent against all applicable patterns.

        Args:
            intent: The intent to validate.
            context: Caller context; ``current_domain`` drives domain filters.
            timeout_seconds: Deadline for the whole call. Evaluations still
                pending at the deadline are cancelled and reported as
                failed outcomes. None disables the deadline.

        Returns:
            ModelValidationResult with outcomes in registration order.
        """
        candidates = self.get_applicable(intent, context)
        tasks = [
            asyncio.ensure_future(self._evaluate(pattern, intent, context))
            for pattern in candidates
        ]
        try:
            if tasks:
                _, pending = await asyncio.wait(tasks, timeout=timeout_seconds)
                for task in pending:
                    task.cancel()
                if pending:
                    await asyncio.gather(*pending, return_exceptions=True)
        finally:
            leftover = [task for task in tasks if not task.done()]
            for task in leftover:
                task.cancel()
            if leftover:
                await asyncio.gather(*leftover, return_exceptions=True)

        outcomes: list[ModelValidationOutcome] = []
        for pattern, task in zip(candidates, tasks, strict=True):
            if task.cancelled():
                logger.warning(
                    "Pattern evaluation exceeded deadline. pattern_id=%s, "
                    "intent=%s, correlation_id=%s, timeout_seconds=%s",
                    pattern.id,
                    intent.name,
                    intent.correlation_id,
                    timeout_seconds,
                )
                outcome: ModelValidationOutcome | None = _fault_outcome(
                    pattern,
                    f"evaluation exceeded deadline of {timeout_seconds}s",
                )
            else:
                outcome = task.result()
            if outcome is not None:
                outcomes.append(outcome)

        result = ModelValidationResult.from_outcomes(outcomes, intent)
        logger.debug(
            "Pattern validation complete. intent=%s, correlation_id=%s, "
            "evaluated=%d, valid=%s",
            intent.name,
            intent.correlation_id,
            len(outcomes),
            result.valid,
        )
        return result

    async def _evaluate(
        self,
        pattern: ModelPatternDefinition,
        intent: ModelIntent,
        context: ModelIntentContext,
    ) -> ModelValidationOutcome | None:
        """Evaluate one pattern; never raises (except on cancellation).

        Returns None when the ``applies_to`` predicate deselects the intent.
        """
        try:
            if pattern.applies_to is not None and not pattern.applies_to(
                intent, context
            ):
                return None
            raw = pattern.evaluator(intent, context)
            if inspect.isawaitable(raw):
                raw = await raw
            evaluation = ModelPatternEvaluation.coerce(raw)
        except Exception as e:
            logger.warning(
                "Pattern evaluator raised. pattern_id=%s, intent=%s, "
                "correlation_id=%s, error=%s",
                pattern.id,
                intent.name,
                intent.correlation_id,
                e,
            )
            return _fault_outcome(pattern, str(e) or type(e).__name__)

        return ModelValidationOutcome(
            pattern_id=pattern.id,
            pattern_name=pattern.name,
            severity=pattern.severity,
            valid=evaluation.valid,
            message=(
                None
                if evaluation.valid
                else evaluation.message or pattern.violation_message
            ),
            details=evaluation.details,
        )


def _fault_outcome(
    pattern: ModelPatternDefinition, cause: str
) -> ModelValidationOutcome:
    """Build the failed outcome for an evaluator fault at its own severity."""
    return ModelValidationOutcome(
        pattern_id=pattern.id,
        pattern_name=pattern.name,
        severity=pattern.severity,
        valid=False,
        message=f"{FAULT_MESSAGE_PREFIX}{cause}",
    )


__all__ = ["FAULT_MESSAGE_PREFIX", "PatternRegistry"]
