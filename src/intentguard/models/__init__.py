# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data models for IntentGuard."""

from intentguard.models.model_builtin_config import (
    ModelDomainBoundaryConfig,
    ModelOwnerIdConfig,
)
from intentguard.models.model_domain_event import ModelDomainEvent, ModelIntentResult
from intentguard.models.model_intent import ModelIntent, ModelQueryIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
    ModelPatternUpdate,
    PatternApplicability,
    PatternEvaluator,
)
from intentguard.models.model_role_permission import WILDCARD, ModelRolePermission
from intentguard.models.model_validation_result import (
    ROLE_PERMISSION_OUTCOME_ID,
    ModelIntentSummary,
    ModelValidationOutcome,
    ModelValidationResult,
)

__all__ = [
    "ROLE_PERMISSION_OUTCOME_ID",
    "WILDCARD",
    "ModelDomainBoundaryConfig",
    "ModelDomainEvent",
    "ModelIntent",
    "ModelIntentContext",
    "ModelIntentResult",
    "ModelIntentSummary",
    "ModelOwnerIdConfig",
    "ModelPatternDefinition",
    "ModelPatternEvaluation",
    "ModelPatternUpdate",
    "ModelQueryIntent",
    "ModelRolePermission",
    "ModelValidationOutcome",
    "ModelValidationResult",
    "PatternApplicability",
    "PatternEvaluator",
]
