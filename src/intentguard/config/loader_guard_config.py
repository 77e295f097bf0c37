# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Load guard configuration from YAML.

Parse and schema errors are raised as GuardConfigurationError carrying the
offending field path, so a bad config fails fast at startup instead of
producing a partially configured guard.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from intentguard.config.model_guard_config import ModelGuardConfig
from intentguard.exceptions import GuardConfigurationError

logger = logging.getLogger(__name__)


def load_guard_config(path: str | Path) -> ModelGuardConfig:
    """Load and validate a guard configuration file.

    Raises:
        GuardConfigurationError: If the file cannot be read or is invalid.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise GuardConfigurationError(
            f"Cannot read guard config {str(path)!r}: {exc}", field="file"
        ) from exc
    config = load_guard_config_from_string(content)
    logger.info(
        "Loaded guard config. path=%s, patterns=%d, roles=%d",
        path,
        len(config.patterns),
        len(config.role_permissions),
    )
    return config


def load_guard_config_from_string(yaml_content: str) -> ModelGuardConfig:
    """Parse a YAML string into a guard configuration.

    Raises:
        GuardConfigurationError: On YAML syntax or schema errors.
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as exc:
        line_hint = ""
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            line_hint = f" (line {mark.line + 1})"
        raise GuardConfigurationError(
            f"Invalid YAML syntax{line_hint}: {exc}", field="yaml"
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GuardConfigurationError(
            "Guard config must be a YAML mapping (key: value pairs), "
            f"got {type(data).__name__}",
            field="root",
        )
    return load_guard_config_from_dict(data)


def load_guard_config_from_dict(data: dict[str, Any]) -> ModelGuardConfig:
    """Validate an already-parsed configuration mapping.

    Raises:
        GuardConfigurationError: On schema errors; the first error's field
            path is attached and every error is listed in the message.
    """
    try:
        return ModelGuardConfig.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors()
        messages = []
        for error in errors:
            loc = error.get("loc", ())
            field_path = ".".join(str(part) for part in loc) if loc else "root"
            messages.append(f"{field_path}: {error.get('msg', 'Validation error')}")
        first_loc = errors[0].get("loc", ()) if errors else ()
        raise GuardConfigurationError(
            "; ".join(messages),
            field=".".join(str(part) for part in first_loc) or None,
        ) from exc


__all__ = [
    "load_guard_config",
    "load_guard_config_from_dict",
    "load_guard_config_from_string",
]
