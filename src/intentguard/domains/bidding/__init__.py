# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Bidding domain gate."""

from intentguard.domains.bidding.guard_bidding import (
    BIDDING_DOMAIN,
    BIDDING_ROLE_PERMISSIONS,
    REQUIRED_BID_FIELDS,
    BiddingGuard,
    BiddingGuardConfig,
    BiddingIntent,
    BiddingPattern,
    create_bidding_patterns,
)

__all__ = [
    "BIDDING_DOMAIN",
    "BIDDING_ROLE_PERMISSIONS",
    "REQUIRED_BID_FIELDS",
    "BiddingGuard",
    "BiddingGuardConfig",
    "BiddingIntent",
    "BiddingPattern",
    "create_bidding_patterns",
]
