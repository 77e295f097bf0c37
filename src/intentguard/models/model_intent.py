# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Intent models for IntentGuard.

An intent is the structured description of a requested operation. It is
built once per inbound operation by the request-handling layer, submitted
to the guard, and discarded after the guard returns. Intents are frozen.

Two shapes exist:
    - ModelIntent: a named domain operation (e.g. ``submitBid``) with params
    - ModelQueryIntent: a data operation over one or more tables, carrying
      filters and a payload; the built-in owner-ID and domain-boundary
      checks only apply to this shape
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intentguard.enums.enum_query_operation import EnumQueryOperation


class ModelIntent(BaseModel):
    """A request to perform a named operation within a domain.

    Attributes:
        name: Operation identifier (e.g. "submitBid").
        params: Parameters needed to fulfil the intent, in caller order.
        source_domain: Domain that originated the intent.
        caller_id: Authenticated principal, if any.
        caller_roles: Roles held by the caller.
        correlation_id: Opaque tracing token. The guard rejects blank values.
        timestamp: When the intent was created (UTC).
        metadata: Additional free-form context.

    Example::

        intent = ModelIntent(
            name="submitBid",
            params={"projectId": "p1", "amount": 5000},
            source_domain="bidding",
            caller_id="c1",
            caller_roles={"contractor"},
            correlation_id="550e8400-e29b-41d4-a716-446655440000",
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Operation identifier")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Parameters needed to fulfil the intent",
    )
    source_domain: str = Field(
        default="",
        description="Domain that originated this intent",
    )
    caller_id: str | None = Field(
        default=None,
        description="Authenticated principal that initiated the intent",
    )
    caller_roles: frozenset[str] = Field(
        default_factory=frozenset,
        description="Roles held by the caller",
    )
    correlation_id: str = Field(
        ...,
        description="Correlation ID for tracing across operations",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the intent was created",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional contextual metadata",
    )


class ModelQueryIntent(ModelIntent):
    """A data operation over one or more tables.

    Table names may be schema-qualified (``bidding.bids``); the built-in
    checks compare the last dotted segment, case-insensitively.

    Attributes:
        operation: Shape of the operation (select, insert, update, ...).
        tables: Tables or entity sets the operation touches, primary first.
        filters: Column filters selecting the affected rows.
        data: Payload for create and update operations.
        entity_type: Optional entity kind (e.g. "homeowner", "contractor").
        description: Optional human description of the operation.
    """

    operation: EnumQueryOperation = Field(
        ...,
        description="Shape of the requested data operation",
    )
    tables: tuple[str, ...] = Field(
        default=(),
        description="Tables or entity sets touched by the operation",
    )
    filters: dict[str, Any] = Field(
        default_factory=dict,
        description="Column filters selecting the affected rows",
    )
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Payload for create and update operations",
    )
    entity_type: str | None = Field(
        default=None,
        description="Entity kind the operation acts on",
    )
    description: str | None = Field(
        default=None,
        description="Human description of the operation",
    )

    @property
    def normalized_tables(self) -> tuple[str, ...]:
        """Return table names lower-cased with any schema prefix removed."""
        return tuple(table.rsplit(".", 1)[-1].lower() for table in self.tables)


__all__ = ["ModelIntent", "ModelQueryIntent"]
