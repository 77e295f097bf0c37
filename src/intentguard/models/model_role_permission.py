# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Role permission model for the guard's allow/deny lookup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Matches every intent name in allow and deny lists.
WILDCARD = "*"


class ModelRolePermission(BaseModel):
    """Intents a role may or may not execute.

    Denials are evaluated before allows and always win for the same role.

    Attributes:
        role: Role name (e.g. "contractor").
        allowed_intents: Intent names the role may execute; ``*`` allows all.
        denied_intents: Intent names explicitly denied; ``*`` denies all.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    role: str = Field(..., min_length=1, description="Role name")
    allowed_intents: frozenset[str] = Field(
        default_factory=frozenset,
        description="Intent names the role may execute",
    )
    denied_intents: frozenset[str] = Field(
        default_factory=frozenset,
        description="Intent names explicitly denied to the role",
    )

    def denies(self, intent_name: str) -> bool:
        return WILDCARD in self.denied_intents or intent_name in self.denied_intents

    def allows(self, intent_name: str) -> bool:
        if self.denies(intent_name):
            return False
        return WILDCARD in self.allowed_intents or intent_name in self.allowed_intents


__all__ = ["WILDCARD", "ModelRolePermission"]
