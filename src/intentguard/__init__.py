# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""IntentGuard - intent validation and architectural-pattern enforcement.

Gates structured operation requests (intents) against registered patterns,
role permissions and built-in owner-ID / domain-boundary checks before they
reach business logic.

Quick Start:
    >>> import asyncio
    >>> from intentguard import IntentGuard, ModelIntent
    >>> guard = IntentGuard(domain="bidding")
    >>> intent = ModelIntent(
    ...     name="getBid",
    ...     params={"bidId": "b1"},
    ...     source_domain="bidding",
    ...     correlation_id="550e8400-e29b-41d4-a716-446655440000",
    ... )
    >>> asyncio.run(guard.validate_intent(intent)).valid
    True
"""

from intentguard.enums import EnumPatternSeverity, EnumQueryOperation
from intentguard.exceptions import (
    DuplicatePatternError,
    GuardConfigurationError,
    IntentGuardError,
    MalformedIntentError,
    PatternNotFoundError,
    ProtectedPatternError,
    UnknownIntentError,
)
from intentguard.guard import IntentGuard
from intentguard.models import (
    ModelIntent,
    ModelIntentContext,
    ModelPatternDefinition,
    ModelPatternEvaluation,
    ModelPatternUpdate,
    ModelQueryIntent,
    ModelRolePermission,
    ModelValidationOutcome,
    ModelValidationResult,
)
from intentguard.registry import PatternRegistry

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "DuplicatePatternError",
    # Enums
    "EnumPatternSeverity",
    "EnumQueryOperation",
    "GuardConfigurationError",
    # Main API
    "IntentGuard",
    "IntentGuardError",
    "MalformedIntentError",
    # Models
    "ModelIntent",
    "ModelIntentContext",
    "ModelPatternDefinition",
    "ModelPatternEvaluation",
    "ModelPatternUpdate",
    "ModelQueryIntent",
    "ModelRolePermission",
    "ModelValidationOutcome",
    "ModelValidationResult",
    "PatternNotFoundError",
    "PatternRegistry",
    "ProtectedPatternError",
    "UnknownIntentError",
]
