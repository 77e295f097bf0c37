# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Configuration for IntentGuard: YAML schema, loader and env settings."""

from intentguard.config.loader_guard_config import (
    load_guard_config,
    load_guard_config_from_dict,
    load_guard_config_from_string,
)
from intentguard.config.model_guard_config import ModelGuardConfig
from intentguard.config.settings_guard import GuardSettings

__all__ = [
    "GuardSettings",
    "ModelGuardConfig",
    "load_guard_config",
    "load_guard_config_from_dict",
    "load_guard_config_from_string",
]
