# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern severity enum for IntentGuard.

Severity governs how a failed pattern affects the aggregate verdict of
a validation run.
"""

from enum import Enum


class EnumPatternSeverity(str, Enum):
    """Severity levels for pattern violations.

    Severity rules:
    - ERROR violations make the aggregate ValidationResult invalid
    - WARNING violations are recorded but never block the operation
    - INFO violations are recorded for metrics only

    Example:
        >>> from intentguard.enums import EnumPatternSeverity
        >>> EnumPatternSeverity("warning").is_blocking
        False
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def is_blocking(self) -> bool:
        """Return True if a violation at this severity blocks the intent."""
        return self is EnumPatternSeverity.ERROR


__all__ = ["EnumPatternSeverity"]
