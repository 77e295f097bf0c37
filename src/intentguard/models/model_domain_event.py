# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Domain event and intent result models.

These are the inputs of the guard's post-execution extension points
(``validate_result`` and ``validate_event``). The guard never produces
them; they come from the business-logic collaborator.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelDomainEvent(BaseModel):
    """Something that happened in a domain (e.g. ``bidding:bid_submitted``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., min_length=1, description="Event type")
    payload: dict[str, Any] = Field(default_factory=dict)
    source: str = Field(..., description="Domain that produced the event")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    correlation_id: str = Field(..., description="Correlation ID for tracing")
    metadata: dict[str, Any] = Field(default_factory=dict)


class ModelIntentResult(BaseModel):
    """Outcome of fulfilling a permitted intent.

    Attributes:
        success: Whether the intent was fulfilled.
        data: Data returned on success.
        error: Error description on failure.
        events: Events generated while fulfilling the intent.
        metadata: Additional metadata about the result.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    data: Any = None
    error: str | None = None
    events: tuple[ModelDomainEvent, ...] = ()
    metadata: dict[str, Any] = Field(default_factory=dict)


__all__ = ["ModelDomainEvent", "ModelIntentResult"]
