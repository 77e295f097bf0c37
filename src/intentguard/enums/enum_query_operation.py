# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Query operation enum for query-shaped intents."""

from enum import Enum


class EnumQueryOperation(str, Enum):
    """Shape of the data operation a QueryIntent requests.

    The owner-ID checks group these shapes:
        - SELECT, JOIN, UPDATE, DELETE, TRANSACTION: filter-scoped, the
          owner key must appear in the intent filters
        - INSERT: create-shaped, the owner key must appear in the payload
    """

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    JOIN = "join"
    TRANSACTION = "transaction"

    @property
    def is_create(self) -> bool:
        """Return True for create-shaped operations."""
        return self is EnumQueryOperation.INSERT

    @property
    def is_filter_scoped(self) -> bool:
        """Return True for operations that select rows through filters."""
        return self is not EnumQueryOperation.INSERT


__all__ = ["EnumQueryOperation"]
