# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Guard configuration schema.

The configuration surface is supplied at guard construction time:
declarative patterns, role permissions, the owner-ID knobs and the
domain-boundary map. It is usually loaded from YAML (see
``loader_guard_config``).

YAML structure::

    version: "1.0"
    known_intents: [submitBid, acceptBid]
    role_permissions:
      - role: contractor
        allowed_intents: [submitBid]
      - role: suspended
        denied_intents: ["*"]
    patterns:
      - kind: required_fields
        id: bid-fields
        name: Bid Fields
        intent_names: [submitBid]
        fields: [projectId, amount]
    owner_id:
      owner_keys: [user_id, contractor_id]
    domain_boundary:
      allowed_domain_pairs:
        - [bidding, payment]
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from intentguard.models.model_builtin_config import (
    ModelDomainBoundaryConfig,
    ModelOwnerIdConfig,
)
from intentguard.models.model_role_permission import ModelRolePermission
from intentguard.patterns.pattern_declarative import ModelPatternSpec


class ModelGuardConfig(BaseModel):
    """Top-level guard configuration.

    Attributes:
        version: Configuration schema version ("1.0" style).
        known_intents: Intent names the guard accepts (empty = any).
        role_permissions: Role allow/deny entries.
        patterns: Declarative pattern specs, registered in order.
        owner_id: Owner-ID pattern configuration.
        domain_boundary: Domain-boundary pattern configuration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(default="1.0", min_length=1)
    known_intents: frozenset[str] = Field(default_factory=frozenset)
    role_permissions: tuple[ModelRolePermission, ...] = Field(default=())
    patterns: tuple[ModelPatternSpec, ...] = Field(default=())
    owner_id: ModelOwnerIdConfig = Field(default_factory=ModelOwnerIdConfig)
    domain_boundary: ModelDomainBoundaryConfig = Field(
        default_factory=ModelDomainBoundaryConfig
    )

    @field_validator("version")
    @classmethod
    def validate_version_format(cls, v: str) -> str:
        if not re.match(r"^\d+\.\d+(\.\d+)?$", v):
            raise ValueError(
                f"version must follow semver format (e.g., '1.0' or '1.0.0'), got: {v!r}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> ModelGuardConfig:
        """Reject duplicate pattern ids and duplicate role entries."""
        for label, keys in (
            ("pattern IDs", [p.id for p in self.patterns]),
            ("roles", [r.role for r in self.role_permissions]),
        ):
            seen: set[str] = set()
            duplicates: list[str] = []
            for key in keys:
                if key in seen:
                    duplicates.append(key)
                seen.add(key)
            if duplicates:
                raise ValueError(
                    f"Duplicate {label} found in config: {sorted(set(duplicates))}"
                )
        return self


__all__ = ["ModelGuardConfig"]
