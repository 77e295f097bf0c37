# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Guard orchestration and role/permission checks."""

from intentguard.guard.guard_intent import IntentGuard
from intentguard.guard.handler_role_permission import (
    RoleCheckDecision,
    build_role_outcome,
    check_role_permission,
)

__all__ = [
    "IntentGuard",
    "RoleCheckDecision",
    "build_role_outcome",
    "check_role_permission",
]
