# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration models for the built-in security patterns."""

from __future__ import annotations

from itertools import combinations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from intentguard.constants import (
    DEFAULT_ALLOWED_DOMAIN_PAIRS,
    DEFAULT_OWNED_TABLES,
    DEFAULT_OWNER_KEYS,
    DEFAULT_TABLE_DOMAINS,
)


class ModelOwnerIdConfig(BaseModel):
    """Configuration for the owner-ID patterns.

    Attributes:
        owned_tables: Tables whose rows belong to a principal.
        owner_keys: Column names that identify the owning principal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    owned_tables: frozenset[str] = Field(
        default=DEFAULT_OWNED_TABLES,
        description="Tables holding principal-owned rows",
    )
    owner_keys: tuple[str, ...] = Field(
        default=DEFAULT_OWNER_KEYS,
        min_length=1,
        description="Columns identifying the owning principal",
    )

    @field_validator("owned_tables")
    @classmethod
    def normalize_tables(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(table.rsplit(".", 1)[-1].lower() for table in v)


class ModelDomainBoundaryConfig(BaseModel):
    """Configuration for the domain-boundary pattern.

    Attributes:
        table_domains: Static table-to-domain lookup.
        allowed_domain_pairs: Unordered domain pairs that may be combined.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    table_domains: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TABLE_DOMAINS),
        description="Maps table names to their bounded domain",
    )
    allowed_domain_pairs: tuple[tuple[str, str], ...] = Field(
        default=DEFAULT_ALLOWED_DOMAIN_PAIRS,
        description="Unordered domain pairs permitted in one operation",
    )

    @field_validator("table_domains")
    @classmethod
    def normalize_table_names(cls, v: dict[str, str]) -> dict[str, str]:
        return {table.rsplit(".", 1)[-1].lower(): domain for table, domain in v.items()}

    def domains_for(self, tables: tuple[str, ...]) -> list[str]:
        """Return the distinct domains of the given normalized tables, sorted."""
        return sorted(
            {self.table_domains[t] for t in tables if t in self.table_domains}
        )

    def is_pair_allowed(self, first: str, second: str) -> bool:
        wanted = frozenset((first, second))
        return any(frozenset(pair) == wanted for pair in self.allowed_domain_pairs)

    def disallowed_pairs(self, domains: list[str]) -> list[tuple[str, str]]:
        """Return every pairwise combination of domains not allow-listed."""
        return [
            (a, b) for a, b in combinations(domains, 2) if not self.is_pair_allowed(a, b)
        ]


__all__ = ["ModelDomainBoundaryConfig", "ModelOwnerIdConfig"]
