# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for IntentGuard.

Two families of errors are raised as exceptions:
    - Configuration errors: duplicate, missing or protected pattern ids and
      invalid configuration files. Raised immediately to the caller of the
      mutation or loader.
    - Malformed intents: missing name or correlation id, query intents
      without tables, unknown intent names. Raised before any pattern runs.

Policy violations are never exceptions; they are outcomes in a
ModelValidationResult.
"""

from __future__ import annotations


class IntentGuardError(Exception):
    """Base class for all IntentGuard errors."""


class GuardConfigurationError(IntentGuardError):
    """Raised when the guard or registry configuration is invalid.

    Attributes:
        field: Field path that caused the error, when known.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


class DuplicatePatternError(GuardConfigurationError):
    """Raised when registering a pattern whose id is already present."""

    def __init__(self, pattern_id: str) -> None:
        self.pattern_id = pattern_id
        super().__init__(f"Pattern with ID {pattern_id!r} already exists")


class PatternNotFoundError(GuardConfigurationError):
    """Raised when updating a pattern id that is not registered."""

    def __init__(self, pattern_id: str) -> None:
        self.pattern_id = pattern_id
        super().__init__(f"Pattern with ID {pattern_id!r} not found")


class ProtectedPatternError(GuardConfigurationError):
    """Raised when modifying or removing a built-in pattern."""

    def __init__(self, pattern_id: str) -> None:
        self.pattern_id = pattern_id
        super().__init__(
            f"Pattern {pattern_id!r} is a built-in security pattern and "
            "cannot be updated or unregistered"
        )


class MalformedIntentError(IntentGuardError):
    """Raised when an intent lacks the structure needed for a decision.

    Attributes:
        field: The intent field that is missing or empty.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Malformed intent ({field}): {message}")


class UnknownIntentError(MalformedIntentError):
    """Raised when the intent name is not one the guard knows."""

    def __init__(self, intent_name: str) -> None:
        self.intent_name = intent_name
        super().__init__("name", f"unknown intent {intent_name!r}")


__all__ = [
    "DuplicatePatternError",
    "GuardConfigurationError",
    "IntentGuardError",
    "MalformedIntentError",
    "PatternNotFoundError",
    "ProtectedPatternError",
    "UnknownIntentError",
]
