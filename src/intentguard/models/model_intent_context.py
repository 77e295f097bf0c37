# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Caller context supplied alongside an intent."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intentguard.models.model_intent import ModelIntent


class ModelIntentContext(BaseModel):
    """Context in which an intent is being validated.

    Attributes:
        current_domain: Domain whose gate is processing the intent. Pattern
            domain filters are matched against this value.
        caller_id: Authenticated principal, if any.
        caller_roles: Roles used for the permission check.
        metadata: Free-form data available to pattern evaluators.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_domain: str = Field(
        ...,
        description="Domain where the intent is being processed",
    )
    caller_id: str | None = Field(default=None, description="Calling principal")
    caller_roles: frozenset[str] = Field(
        default_factory=frozenset,
        description="Roles held by the caller",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional contextual data for pattern evaluation",
    )

    @classmethod
    def from_intent(
        cls, intent: ModelIntent, current_domain: str | None = None
    ) -> ModelIntentContext:
        """Derive a context from the caller fields carried by an intent."""
        return cls(
            current_domain=current_domain or intent.source_domain,
            caller_id=intent.caller_id,
            caller_roles=intent.caller_roles,
        )


__all__ = ["ModelIntentContext"]
