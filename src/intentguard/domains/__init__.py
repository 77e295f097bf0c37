# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Concrete domain gates built on IntentGuard."""

__all__: list[str] = []
