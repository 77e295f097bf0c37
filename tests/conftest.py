"""
Pytest configuration and fixtures for intentguard tests.

Shared fixtures for intents, contexts, settings and guards.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from intentguard.config.settings_guard import GuardSettings
from intentguard.enums import EnumPatternSeverity, EnumQueryOperation
from intentguard.models import (
    ModelIntent,
    ModelIntentContext,
    ModelPatternDefinition,
    ModelQueryIntent,
)

# =========================================================================
# Basic Sample Data Fixtures
# =========================================================================


@pytest.fixture
def correlation_id() -> str:
    """Provide a valid UUID test correlation ID for distributed tracing."""
    return "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def settings() -> GuardSettings:
    """Guard settings independent of the process environment."""
    return GuardSettings(
        enforcement_enabled=True,
        owner_id_enforce=True,
        evaluation_timeout_seconds=2.0,
        role_default_allow=True,
        log_validation=False,
        config_path=None,
    )


@pytest.fixture
def bidding_context() -> ModelIntentContext:
    return ModelIntentContext(
        current_domain="bidding",
        caller_id="c1",
        caller_roles=frozenset({"contractor"}),
    )


# =========================================================================
# Factories
# =========================================================================


@pytest.fixture
def make_intent(correlation_id: str) -> Callable[..., ModelIntent]:
    """Factory for named intents with sensible defaults."""

    def _make(name: str = "submitBid", **overrides: Any) -> ModelIntent:
        fields: dict[str, Any] = {
            "name": name,
            "params": {},
            "source_domain": "bidding",
            "caller_id": "c1",
            "caller_roles": frozenset({"contractor"}),
            "correlation_id": correlation_id,
        }
        fields.update(overrides)
        return ModelIntent(**fields)

    return _make


@pytest.fixture
def make_query_intent(correlation_id: str) -> Callable[..., ModelQueryIntent]:
    """Factory for query intents."""

    def _make(
        operation: EnumQueryOperation = EnumQueryOperation.SELECT,
        tables: tuple[str, ...] = ("bids",),
        **overrides: Any,
    ) -> ModelQueryIntent:
        fields: dict[str, Any] = {
            "name": f"{operation.value}:{tables[0] if tables else 'none'}",
            "operation": operation,
            "tables": tables,
            "source_domain": "bidding",
            "caller_id": "c1",
            "correlation_id": correlation_id,
        }
        fields.update(overrides)
        return ModelQueryIntent(**fields)

    return _make


@pytest.fixture
def make_pattern() -> Callable[..., ModelPatternDefinition]:
    """Factory for patterns backed by a simple evaluator."""

    def _make(
        pattern_id: str = "p1",
        evaluator: Callable[..., Any] | None = None,
        severity: EnumPatternSeverity = EnumPatternSeverity.ERROR,
        **overrides: Any,
    ) -> ModelPatternDefinition:
        return ModelPatternDefinition(
            id=pattern_id,
            name=overrides.pop("name", f"Pattern {pattern_id}"),
            severity=severity,
            evaluator=evaluator or (lambda intent, ctx: True),
            **overrides,
        )

    return _make
