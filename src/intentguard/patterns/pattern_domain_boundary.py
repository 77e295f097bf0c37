# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Built-in domain-boundary pattern.

A query whose tables span more than one bounded domain must only combine
domains whose unordered pair is allow-listed. With three or more domains
every pairwise combination must be allowed. Violations are warnings:
some cross-domain access is legitimate, it just has to be intentional.
"""

from __future__ import annotations

from intentguard.constants import DOMAIN_BOUNDARY_PATTERN_ID
from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.models.model_builtin_config import ModelDomainBoundaryConfig
from intentguard.models.model_intent import ModelIntent, ModelQueryIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
)


class DomainBoundaryEvaluator:
    """Checks cross-domain table access against the allow-list."""

    def __init__(self, config: ModelDomainBoundaryConfig) -> None:
        self._config = config

    def domains(self, intent: ModelIntent) -> list[str]:
        if not isinstance(intent, ModelQueryIntent):
            return []
        return self._config.domains_for(intent.normalized_tables)

    def applies(self, intent: ModelIntent, context: ModelIntentContext) -> bool:
        return len(self.domains(intent)) > 1

    def __call__(
        self, intent: ModelIntent, context: ModelIntentContext
    ) -> ModelPatternEvaluation:
        domains = self.domains(intent)
        disallowed = self._config.disallowed_pairs(domains)
        details: dict[str, object] = {"domains": domains}
        if not disallowed:
            return ModelPatternEvaluation(valid=True, details=details)
        details["disallowed_pairs"] = [list(pair) for pair in disallowed]
        return ModelPatternEvaluation(
            valid=False,
            message=(
                f"Cross-domain access between {', '.join(domains)} is not "
                "allow-listed"
            ),
            details=details,
        )


def create_domain_boundary_pattern(
    config: ModelDomainBoundaryConfig | None = None,
) -> ModelPatternDefinition:
    """Build the protected domain-boundary pattern definition."""
    evaluator = DomainBoundaryEvaluator(config or ModelDomainBoundaryConfig())
    return ModelPatternDefinition(
        id=DOMAIN_BOUNDARY_PATTERN_ID,
        name="Domain Boundary",
        description="Cross-domain operations must use allow-listed domain pairs",
        severity=EnumPatternSeverity.WARNING,
        evaluator=evaluator,
        applies_to=evaluator.applies,
        violation_message="Operation crosses a domain boundary that is not allow-listed",
        protected=True,
    )


__all__ = ["DomainBoundaryEvaluator", "create_domain_boundary_pattern"]
