# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default configuration values for the built-in security patterns.

The table-to-domain map follows the InstaBids schema layout. Tables not
listed here belong to no domain and never trigger the domain-boundary
check.
"""

from __future__ import annotations

from typing import Final

# Built-in pattern ids.
OWNER_ID_FILTER_PATTERN_ID: Final[str] = "builtin:owner_id_filter"
OWNER_ID_REASSIGNMENT_PATTERN_ID: Final[str] = "builtin:owner_id_reassignment"
DOMAIN_BOUNDARY_PATTERN_ID: Final[str] = "builtin:domain_boundary"

# Tables holding principal-owned rows.
DEFAULT_OWNED_TABLES: Final[frozenset[str]] = frozenset(
    {
        "profiles",
        "users",
        "projects",
        "bids",
        "contractors",
        "homeowners",
        "messages",
        "payments",
    }
)

# Columns that identify the owning principal.
DEFAULT_OWNER_KEYS: Final[tuple[str, ...]] = (
    "user_id",
    "auth_id",
    "homeowner_id",
    "contractor_id",
    "created_by",
)

DEFAULT_TABLE_DOMAINS: Final[dict[str, str]] = {
    # bidding
    "bid_cards": "bidding",
    "bid_card_media": "bidding",
    "bid_card_revisions": "bidding",
    "bids": "bidding",
    "bid_acceptances": "bidding",
    "bid_revisions": "bidding",
    "bid_commitments": "bidding",
    "bid_groups": "bidding",
    "bid_group_members": "bidding",
    "group_bids": "bidding",
    "group_bid_acceptances": "bidding",
    "contact_releases": "bidding",
    # payment
    "payments": "payment",
    "payment_methods": "payment",
    "payment_transactions": "payment",
    "escrow_accounts": "payment",
    "escrow_transactions": "payment",
    "milestone_payments": "payment",
    "payment_disputes": "payment",
    "withdrawal_requests": "payment",
    "connection_payments": "payment",
    # messaging
    "conversations": "messaging",
    "conversation_participants": "messaging",
    "messages": "messaging",
    "message_templates": "messaging",
    "notifications": "messaging",
    "support_tickets": "messaging",
    # project management
    "projects": "project_management",
    "project_phases": "project_management",
    "project_milestones": "project_management",
    "project_tasks": "project_management",
    "project_contracts": "project_management",
    "project_change_orders": "project_management",
    "project_issues": "project_management",
    # user management
    "profiles": "user_management",
    "homeowners": "user_management",
    "contractors": "user_management",
    "contractor_portfolio": "user_management",
    "contractor_reviews": "user_management",
    "homeowner_reviews": "user_management",
    "verification_checks": "user_management",
    # core
    "users": "core",
    "user_auth": "core",
    "user_addresses": "core",
    "audit_logs": "core",
}

# Unordered domain pairs that may be touched by a single operation.
DEFAULT_ALLOWED_DOMAIN_PAIRS: Final[tuple[tuple[str, str], ...]] = (
    ("bidding", "project_management"),
    ("bidding", "user_management"),
    ("project_management", "user_management"),
    ("messaging", "user_management"),
    ("payment", "project_management"),
)

# Default deadline for one validate call, in seconds.
DEFAULT_EVALUATION_TIMEOUT_SECONDS: Final[float] = 5.0

__all__ = [
    "DEFAULT_ALLOWED_DOMAIN_PAIRS",
    "DEFAULT_EVALUATION_TIMEOUT_SECONDS",
    "DEFAULT_OWNED_TABLES",
    "DEFAULT_OWNER_KEYS",
    "DEFAULT_TABLE_DOMAINS",
    "DOMAIN_BOUNDARY_PATTERN_ID",
    "OWNER_ID_FILTER_PATTERN_ID",
    "OWNER_ID_REASSIGNMENT_PATTERN_ID",
]
