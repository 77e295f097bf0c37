# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern implementations: built-in security checks and declarative kinds."""

from intentguard.patterns.pattern_declarative import (
    ModelNumericRangeSpec,
    ModelPatternSpec,
    ModelRequiredFieldsSpec,
    NumericRangeEvaluator,
    RequiredFieldsEvaluator,
    build_pattern,
)
from intentguard.patterns.pattern_domain_boundary import (
    DomainBoundaryEvaluator,
    create_domain_boundary_pattern,
)
from intentguard.patterns.pattern_owner_id import (
    OwnerIdFilterEvaluator,
    OwnerIdReassignmentEvaluator,
    create_owner_id_patterns,
)

__all__ = [
    "DomainBoundaryEvaluator",
    "ModelNumericRangeSpec",
    "ModelPatternSpec",
    "ModelRequiredFieldsSpec",
    "NumericRangeEvaluator",
    "OwnerIdFilterEvaluator",
    "OwnerIdReassignmentEvaluator",
    "RequiredFieldsEvaluator",
    "build_pattern",
    "create_domain_boundary_pattern",
    "create_owner_id_patterns",
]
