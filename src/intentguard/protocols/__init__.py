# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for IntentGuard collaborators.

Pattern evaluators are plain callables. Any object implementing
``__call__(intent, context)`` satisfies ProtocolPatternEvaluator, so
callers can supply custom patterns without subclassing anything.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from intentguard.models.model_intent import ModelIntent
    from intentguard.models.model_intent_context import ModelIntentContext
    from intentguard.models.model_pattern import ModelPatternEvaluation


@runtime_checkable
class ProtocolPatternEvaluator(Protocol):
    """Evaluates whether an intent complies with a pattern.

    Implementations may be synchronous or return an awaitable. Raising is
    allowed: the registry converts the exception into a failed outcome at
    the pattern's own severity.
    """

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> (
        ModelPatternEvaluation
        | Awaitable[ModelPatternEvaluation]
        | dict[str, object]
        | bool
    ):
        ...


__all__ = ["ProtocolPatternEvaluator"]
