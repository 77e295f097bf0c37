# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Role/permission check for the guard.

Pure functions mapping caller roles to an allow/deny decision:

    1. Any held role that denies the intent (by name or ``*``) denies it.
    2. Otherwise any held role that allows it (by name or ``*``) allows it.
    3. With no role permissions configured at all, ``default_allow``
       decides (fail-open by default; patterns remain the backstop).
    4. Otherwise the intent is denied.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.models.model_role_permission import ModelRolePermission
from intentguard.models.model_validation_result import (
    ROLE_PERMISSION_OUTCOME_ID,
    ModelValidationOutcome,
)

REASON_DENIED = "denied"
REASON_ALLOWED = "allowed"
REASON_UNCONFIGURED = "unconfigured"
REASON_NOT_ALLOWED = "not_allowed"


@dataclass(frozen=True)
class RoleCheckDecision:
    """Result of the role/permission check.

    Attributes:
        allowed: Whether the intent may proceed to pattern validation.
        reason: One of the REASON_* constants.
        intent_name: The intent that was checked.
        roles: Roles that were considered, sorted.
        role: The role that decided the outcome, if any.
    """

    allowed: bool
    reason: str
    intent_name: str
    roles: tuple[str, ...] = ()
    role: str | None = None

    @property
    def message(self) -> str:
        if self.reason == REASON_DENIED:
            return f"Role {self.role!r} is denied intent {self.intent_name!r}"
        if self.reason == REASON_NOT_ALLOWED:
            held = ", ".join(self.roles) or "none"
            return f"No role permits intent {self.intent_name!r} (roles: {held})"
        if self.reason == REASON_UNCONFIGURED and not self.allowed:
            return f"No role permissions configured; intent {self.intent_name!r} denied"
        return f"Intent {self.intent_name!r} permitted"


def check_role_permission(
    permissions: Sequence[ModelRolePermission],
    roles: Iterable[str],
    intent_name: str,
    *,
    default_allow: bool = True,
) -> RoleCheckDecision:
    """Decide whether the given roles may execute an intent."""
    held = tuple(sorted(set(roles)))
    if not permissions:
        return RoleCheckDecision(
            allowed=default_allow,
            reason=REASON_UNCONFIGURED,
            intent_name=intent_name,
            roles=held,
        )

    applicable = [p for p in permissions if p.role in held]
    for permission in applicable:
        if permission.denies(intent_name):
            return RoleCheckDecision(
                allowed=False,
                reason=REASON_DENIED,
                intent_name=intent_name,
                roles=held,
                role=permission.role,
            )
    for permission in applicable:
        if permission.allows(intent_name):
            return RoleCheckDecision(
                allowed=True,
                reason=REASON_ALLOWED,
                intent_name=intent_name,
                roles=held,
                role=permission.role,
            )
    return RoleCheckDecision(
        allowed=False,
        reason=REASON_NOT_ALLOWED,
        intent_name=intent_name,
        roles=held,
    )


def build_role_outcome(decision: RoleCheckDecision) -> ModelValidationOutcome:
    """Convert a decision into the guard's role-permission outcome."""
    return ModelValidationOutcome(
        pattern_id=ROLE_PERMISSION_OUTCOME_ID,
        pattern_name="Role Permission",
        severity=EnumPatternSeverity.ERROR,
        valid=decision.allowed,
        message=None if decision.allowed else decision.message,
        details={
            "reason": decision.reason,
            "roles": list(decision.roles),
            "role": decision.role,
        },
    )


__all__ = [
    "REASON_ALLOWED",
    "REASON_DENIED",
    "REASON_NOT_ALLOWED",
    "REASON_UNCONFIGURED",
    "RoleCheckDecision",
    "build_role_outcome",
    "check_role_permission",
]
