# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment settings for IntentGuard.

Environment variables:
    INTENTGUARD_ENFORCEMENT_ENABLED: bool (default true)
    INTENTGUARD_OWNER_ID_ENFORCE: bool (default true)
    INTENTGUARD_EVALUATION_TIMEOUT_SECONDS: float (default 5.0; 0 disables)
    INTENTGUARD_ROLE_DEFAULT_ALLOW: bool (default true)
    INTENTGUARD_LOG_VALIDATION: bool (default false)
    INTENTGUARD_CONFIG_PATH: optional path to a YAML guard config
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from intentguard.constants import DEFAULT_EVALUATION_TIMEOUT_SECONDS


class GuardSettings(BaseSettings):
    """Runtime switches for the guard, loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="INTENTGUARD_",
        extra="ignore",
    )

    enforcement_enabled: bool = Field(
        default=True,
        description="Run pattern validation; when false only role checks apply",
    )
    owner_id_enforce: bool = Field(
        default=True,
        description="Enable the built-in owner-ID patterns",
    )
    evaluation_timeout_seconds: float = Field(
        default=DEFAULT_EVALUATION_TIMEOUT_SECONDS,
        ge=0.0,
        description="Deadline for one validation run (0 disables)",
    )
    role_default_allow: bool = Field(
        default=True,
        description="Allow intents when no role permissions are configured",
    )
    log_validation: bool = Field(
        default=False,
        description="Log every validation summary at INFO",
    )
    config_path: str | None = Field(
        default=None,
        description="Path to a YAML guard configuration file",
    )

    @property
    def timeout(self) -> float | None:
        """Deadline in seconds, or None when disabled."""
        return self.evaluation_timeout_seconds or None


__all__ = ["GuardSettings"]
