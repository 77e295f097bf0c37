# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""IntentGuard: the orchestrating gate in front of business logic.

``validate_intent`` runs, in order:

    0. Structural checks. Malformed intents raise MalformedIntentError
       (or UnknownIntentError) before anything is evaluated.
    1. Role/permission check. A denial short-circuits with a single
       ERROR outcome.
    2. Pattern registry validation, with the built-in owner-ID and
       domain-boundary patterns pre-registered as protected entries.

Pattern evaluator faults never escape ``validate_intent``; they arrive as
failed outcomes. ``validate_result`` and ``validate_event`` are
post-execution extension points that pass by default; domain gates
override them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from intentguard.config.loader_guard_config import load_guard_config
from intentguard.config.model_guard_config import ModelGuardConfig
from intentguard.config.settings_guard import GuardSettings
from intentguard.exceptions import (
    GuardConfigurationError,
    MalformedIntentError,
    UnknownIntentError,
)
from intentguard.guard.handler_role_permission import (
    build_role_outcome,
    check_role_permission,
)
from intentguard.models.model_builtin_config import (
    ModelDomainBoundaryConfig,
    ModelOwnerIdConfig,
)
from intentguard.models.model_domain_event import ModelDomainEvent, ModelIntentResult
from intentguard.models.model_intent import ModelIntent, ModelQueryIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import ModelPatternDefinition, ModelPatternUpdate
from intentguard.models.model_role_permission import ModelRolePermission
from intentguard.models.model_validation_result import ModelValidationResult
from intentguard.patterns.pattern_declarative import build_pattern
from intentguard.patterns.pattern_domain_boundary import create_domain_boundary_pattern
from intentguard.patterns.pattern_owner_id import create_owner_id_patterns
from intentguard.registry.registry_pattern import PatternRegistry

logger = logging.getLogger(__name__)


class IntentGuard:
    """Gate that validates intents before they reach business logic.

    Usage::

        guard = IntentGuard(
            domain="bidding",
            role_permissions=[
                ModelRolePermission(role="contractor", allowed_intents={"submitBid"}),
            ],
        )
        guard.register_pattern(max_amount_pattern)

        result = await guard.validate_intent(intent)
        if not result.valid:
            raise HTTPException(
                status_code=403 if result.is_permission_denied else 400,
                detail=result.format_summary(),
            )

    Args:
        registry: Empty registry for the guard to own. A new one is created
            when omitted. Built-ins are registered first, so a registry that
            already holds patterns (e.g. one shared with another guard) is
            rejected.
        domain: Default ``current_domain`` when no context is supplied.
        role_permissions: Role allow/deny entries.
        patterns: Caller-supplied patterns, registered after the built-ins.
        owner_config: Owner-ID pattern configuration.
        domain_config: Domain-boundary pattern configuration.
        known_intents: Accepted intent names; empty accepts any name.
        settings: Runtime switches; read from the environment when omitted.
    """

    def __init__(
        self,
        registry: PatternRegistry | None = None,
        *,
        domain: str | None = None,
        role_permissions: Iterable[ModelRolePermission] = (),
        patterns: Iterable[ModelPatternDefinition] = (),
        owner_config: ModelOwnerIdConfig | None = None,
        domain_config: ModelDomainBoundaryConfig | None = None,
        known_intents: Iterable[str] | None = None,
        settings: GuardSettings | None = None,
    ) -> None:
        if registry is not None and len(registry):
            raise GuardConfigurationError(
                f"IntentGuard requires an empty registry, got {len(registry)} "
                "registered pattern(s)",
                field="registry",
            )
        self._settings = settings or GuardSettings()
        self._registry = registry if registry is not None else PatternRegistry()
        self._domain = domain
        self._role_permissions = tuple(role_permissions)
        self._known_intents = frozenset(known_intents or ())

        for builtin in create_owner_id_patterns(
            owner_config, enabled=self._settings.owner_id_enforce
        ):
            self._registry.register(builtin)
        self._registry.register(create_domain_boundary_pattern(domain_config))
        for pattern in patterns:
            self._registry.register(pattern)

    @classmethod
    def from_config(
        cls,
        config: ModelGuardConfig,
        *,
        domain: str | None = None,
        settings: GuardSettings | None = None,
    ) -> IntentGuard:
        """Build a guard from a validated configuration."""
        return cls(
            domain=domain,
            role_permissions=config.role_permissions,
            patterns=[build_pattern(spec) for spec in config.patterns],
            owner_config=config.owner_id,
            domain_config=config.domain_boundary,
            known_intents=config.known_intents,
            settings=settings,
        )

    @classmethod
    def from_settings(
        cls, settings: GuardSettings | None = None, *, domain: str | None = None
    ) -> IntentGuard:
        """Build a guard from ``settings.config_path`` (or defaults)."""
        settings = settings or GuardSettings()
        config = (
            load_guard_config(settings.config_path)
            if settings.config_path
            else ModelGuardConfig()
        )
        return cls.from_config(config, domain=domain, settings=settings)

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    @property
    def role_permissions(self) -> tuple[ModelRolePermission, ...]:
        return self._role_permissions

    @property
    def settings(self) -> GuardSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Pattern management
    # ------------------------------------------------------------------

    def register_pattern(self, pattern: ModelPatternDefinition) -> None:
        self._registry.register(pattern)

    def update_pattern(
        self, pattern_id: str, updates: ModelPatternUpdate | Mapping[str, Any]
    ) -> ModelPatternDefinition:
        return self._registry.update(pattern_id, updates)

    def unregister_pattern(self, pattern_id: str) -> bool:
        return self._registry.unregister(pattern_id)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def has_permission(
        self, caller_id: str | None, roles: Iterable[str], intent_name: str
    ) -> bool:
        """Return True if the roles may execute the intent.

        ``caller_id`` is accepted for interface parity with per-user
        policies; the default lookup is role-based only.
        """
        return check_role_permission(
            self._role_permissions,
            roles,
            intent_name,
            default_allow=self._settings.role_default_allow,
        ).allowed

    async def validate_intent(
        self,
        intent: ModelIntent,
        context: ModelIntentContext | None = None,
        *,
        timeout_seconds: float | None = None,
    ) -> ModelValidationResult:
        """Validate an intent before it reaches business logic.

        Args:
            intent: The intent to validate.
            context: Caller context. Derived from the intent and the
                guard's domain when omitted.
            timeout_seconds: Deadline for pattern evaluation. Defaults to
                the configured evaluation timeout.

        Returns:
            ModelValidationResult listing every reason for rejection.

        Raises:
            MalformedIntentError: Missing name or correlation id, or a
                query intent without tables.
            UnknownIntentError: The guard has known intents configured and
                this name is not one of them.
        """
        self._check_structure(intent)
        if context is None:
            context = ModelIntentContext.from_intent(intent, self._domain)
        roles = context.caller_roles or intent.caller_roles

        decision = check_role_permission(
            self._role_permissions,
            roles,
            intent.name,
            default_allow=self._settings.role_default_allow,
        )
        if not decision.allowed:
            logger.info(
                "Intent denied by role check. intent=%s, correlation_id=%s, "
                "roles=%s, reason=%s",
                intent.name,
                intent.correlation_id,
                list(decision.roles),
                decision.reason,
            )
            return ModelValidationResult.from_outcomes(
                [build_role_outcome(decision)], intent
            )

        if not self._settings.enforcement_enabled:
            logger.warning(
                "Pattern enforcement disabled; skipping patterns. intent=%s, "
                "correlation_id=%s",
                intent.name,
                intent.correlation_id,
            )
            return ModelValidationResult.passed(intent)

        timeout = (
            timeout_seconds if timeout_seconds is not None else self._settings.timeout
        )
        result = await self._registry.validate(intent, context, timeout_seconds=timeout)
        self._log_result(result, intent)
        return result

    async def validate_result(
        self, result: ModelIntentResult, intent: ModelIntent
    ) -> ModelValidationResult:
        """Validate the outcome of a permitted operation. Passes by default."""
        return ModelValidationResult.passed(intent)

    async def validate_event(self, event: ModelDomainEvent) -> ModelValidationResult:
        """Validate a domain event before propagation. Passes by default."""
        return ModelValidationResult.passed()

    async def apply_post_execution_hooks(
        self, result: ModelIntentResult, intent: ModelIntent
    ) -> ModelValidationResult:
        """Run ``validate_result`` and ``validate_event`` for every event."""
        combined = await self.validate_result(result, intent)
        for event in result.events:
            combined = combined.merge(await self.validate_event(event))
        if not combined.valid:
            logger.warning(
                "Post-execution validation failed. intent=%s, correlation_id=%s, "
                "summary=%s",
                intent.name,
                intent.correlation_id,
                combined.format_summary(),
            )
        return combined

    def _check_structure(self, intent: ModelIntent) -> None:
        if not intent.name.strip():
            raise MalformedIntentError("name", "intent name must not be blank")
        if not intent.correlation_id.strip():
            raise MalformedIntentError(
                "correlation_id", "every intent must carry a correlation id"
            )
        if isinstance(intent, ModelQueryIntent) and not intent.tables:
            raise MalformedIntentError(
                "tables", "query intents must name at least one table"
            )
        if self._known_intents and intent.name not in self._known_intents:
            raise UnknownIntentError(intent.name)

    def _log_result(self, result: ModelValidationResult, intent: ModelIntent) -> None:
        if self._settings.log_validation or not result.valid:
            logger.info(
                "Intent validation. correlation_id=%s, %s",
                intent.correlation_id,
                result.format_summary(),
            )
        else:
            logger.debug(
                "Intent validation. correlation_id=%s, %s",
                intent.correlation_id,
                result.format_summary(),
            )


__all__ = ["IntentGuard"]
