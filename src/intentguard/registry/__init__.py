# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern registry for IntentGuard."""

from intentguard.registry.registry_pattern import FAULT_MESSAGE_PREFIX, PatternRegistry

__all__ = ["FAULT_MESSAGE_PREFIX", "PatternRegistry"]
