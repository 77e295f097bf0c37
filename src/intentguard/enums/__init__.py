# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enumerations for IntentGuard."""

from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.enums.enum_query_operation import EnumQueryOperation

__all__ = [
    "EnumPatternSeverity",
    "EnumQueryOperation",
]
