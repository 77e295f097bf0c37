# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Guard for the bidding domain.

Registers the bidding rules on top of the built-in security patterns and
restricts intents by role:

    - contractor: submit, update, withdraw and counter bids; read bids;
      create and join group bids
    - homeowner: accept, reject and counter bids; read bids and stats
    - admin: everything
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from intentguard.config.settings_guard import GuardSettings
from intentguard.enums.enum_pattern_severity import EnumPatternSeverity
from intentguard.guard.guard_intent import IntentGuard
from intentguard.models.model_builtin_config import (
    ModelDomainBoundaryConfig,
    ModelOwnerIdConfig,
)
from intentguard.models.model_domain_event import ModelIntentResult
from intentguard.models.model_intent import ModelIntent
from intentguard.models.model_intent_context import ModelIntentContext
from intentguard.models.model_pattern import (
    ModelPatternDefinition,
    ModelPatternEvaluation,
)
from intentguard.models.model_role_permission import WILDCARD, ModelRolePermission
from intentguard.models.model_validation_result import (
    ModelValidationOutcome,
    ModelValidationResult,
)
from intentguard.patterns.pattern_declarative import (
    NumericRangeEvaluator,
    RequiredFieldsEvaluator,
)

BIDDING_DOMAIN: Final[str] = "bidding"


class BiddingIntent(str, Enum):
    """Intents handled by the bidding domain."""

    SUBMIT_BID = "submitBid"
    UPDATE_BID = "updateBid"
    WITHDRAW_BID = "withdrawBid"
    ACCEPT_BID = "acceptBid"
    REJECT_BID = "rejectBid"
    COUNTER_BID = "counterBid"
    GET_BID = "getBid"
    LIST_BIDS = "listBids"
    GET_BID_STATS = "getBidStats"
    CREATE_GROUP_BID = "createGroupBid"
    JOIN_GROUP_BID = "joinGroupBid"


class BiddingPattern(str, Enum):
    """Pattern ids registered by the bidding guard."""

    COMPLETE_BID_DATA = "bidding:complete_bid_data"
    VALID_BID_AMOUNT = "bidding:valid_bid_amount"
    BID_OWNER_ONLY = "bidding:bid_owner_only"
    ACCEPT_REQUIRES_BID_ID = "bidding:accept_requires_bid_id"
    COUNTER_OFFER_TERMS = "bidding:counter_offer_terms"


REQUIRED_BID_FIELDS: Final[tuple[str, ...]] = (
    "projectId",
    "amount",
    "description",
    "timelineInDays",
)

# Successful results of these intents must return the stored bid.
_BID_RETURNING_INTENTS: Final[frozenset[str]] = frozenset(
    {BiddingIntent.SUBMIT_BID.value, BiddingIntent.UPDATE_BID.value}
)

BIDDING_ROLE_PERMISSIONS: Final[tuple[ModelRolePermission, ...]] = (
    ModelRolePermission(
        role="contractor",
        allowed_intents=frozenset(
            {
                BiddingIntent.SUBMIT_BID.value,
                BiddingIntent.UPDATE_BID.value,
                BiddingIntent.WITHDRAW_BID.value,
                BiddingIntent.COUNTER_BID.value,
                BiddingIntent.GET_BID.value,
                BiddingIntent.LIST_BIDS.value,
                BiddingIntent.CREATE_GROUP_BID.value,
                BiddingIntent.JOIN_GROUP_BID.value,
            }
        ),
    ),
    ModelRolePermission(
        role="homeowner",
        allowed_intents=frozenset(
            {
                BiddingIntent.ACCEPT_BID.value,
                BiddingIntent.REJECT_BID.value,
                BiddingIntent.COUNTER_BID.value,
                BiddingIntent.GET_BID.value,
                BiddingIntent.LIST_BIDS.value,
                BiddingIntent.GET_BID_STATS.value,
            }
        ),
    ),
    ModelRolePermission(role="admin", allowed_intents=frozenset({WILDCARD})),
)


class BiddingGuardConfig(BaseModel):
    """Configuration for the bidding guard.

    Attributes:
        min_bid_amount: Smallest accepted bid amount.
        max_bid_amount: Largest accepted bid amount.
        additional_patterns: Extra patterns registered after the defaults.
        log_validation: Log every validation summary at INFO.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_bid_amount: float = Field(default=50, ge=0)
    max_bid_amount: float = Field(default=1_000_000, gt=0)
    additional_patterns: tuple[ModelPatternDefinition, ...] = Field(default=())
    log_validation: bool = False

    @model_validator(mode="after")
    def validate_amount_bounds(self) -> BiddingGuardConfig:
        if self.min_bid_amount > self.max_bid_amount:
            raise ValueError(
                f"min_bid_amount ({self.min_bid_amount}) must not exceed "
                f"max_bid_amount ({self.max_bid_amount})"
            )
        return self


def _bid_owner_only(
    intent: ModelIntent, context: ModelIntentContext
) -> ModelPatternEvaluation:
    # Ownership of the stored bid is verified by the persistence adapter;
    # here the intent must identify both the bid and the caller.
    caller = context.caller_id or intent.caller_id
    return ModelPatternEvaluation(
        valid="bidId" in intent.params and bool(caller),
        details={"has_bid_id": "bidId" in intent.params, "has_caller": bool(caller)},
    )


def _accept_requires_bid_id(
    intent: ModelIntent, context: ModelIntentContext
) -> ModelPatternEvaluation:
    return ModelPatternEvaluation(valid=bool(intent.params.get("bidId")))


def _counter_offer_terms(
    intent: ModelIntent, context: ModelIntentContext
) -> ModelPatternEvaluation:
    params = intent.params
    return ModelPatternEvaluation(
        valid=bool(params.get("counterAmount") or params.get("counterTerms"))
    )


def create_bidding_patterns(
    config: BiddingGuardConfig | None = None,
) -> list[ModelPatternDefinition]:
    """Build the default bidding pattern definitions."""
    config = config or BiddingGuardConfig()
    domains = frozenset({BIDDING_DOMAIN})
    return [
        ModelPatternDefinition(
            id=BiddingPattern.COMPLETE_BID_DATA.value,
            name="Complete Bid Data",
            description="Ensures a bid has all required fields",
            severity=EnumPatternSeverity.ERROR,
            evaluator=RequiredFieldsEvaluator(REQUIRED_BID_FIELDS),
            violation_message="Bid is missing required fields",
            applicable_domains=domains,
            applicable_intent_names=frozenset({BiddingIntent.SUBMIT_BID.value}),
        ),
        ModelPatternDefinition(
            id=BiddingPattern.VALID_BID_AMOUNT.value,
            name="Valid Bid Amount",
            description="Ensures bid amount is within acceptable range",
            severity=EnumPatternSeverity.ERROR,
            evaluator=NumericRangeEvaluator(
                "amount",
                config.min_bid_amount,
                config.max_bid_amount,
                label="Bid amount",
            ),
            violation_message="Bid amount is invalid",
            applicable_domains=domains,
            applicable_intent_names=frozenset(
                {BiddingIntent.SUBMIT_BID.value, BiddingIntent.UPDATE_BID.value}
            ),
        ),
        ModelPatternDefinition(
            id=BiddingPattern.BID_OWNER_ONLY.value,
            name="Bid Owner Only",
            description="Ensures only the bid owner can modify their bid",
            severity=EnumPatternSeverity.ERROR,
            evaluator=_bid_owner_only,
            violation_message="Only the bid owner can modify this bid",
            applicable_domains=domains,
            applicable_intent_names=frozenset(
                {BiddingIntent.UPDATE_BID.value, BiddingIntent.WITHDRAW_BID.value}
            ),
        ),
        ModelPatternDefinition(
            id=BiddingPattern.ACCEPT_REQUIRES_BID_ID.value,
            name="Accept Requires Bid ID",
            description="Accepting a bid must name the bid",
            severity=EnumPatternSeverity.ERROR,
            evaluator=_accept_requires_bid_id,
            violation_message="Bid ID is required to accept a bid",
            applicable_domains=domains,
            applicable_intent_names=frozenset({BiddingIntent.ACCEPT_BID.value}),
        ),
        ModelPatternDefinition(
            id=BiddingPattern.COUNTER_OFFER_TERMS.value,
            name="Counter Offer Terms",
            description="A counter offer must change the amount or the terms",
            severity=EnumPatternSeverity.ERROR,
            evaluator=_counter_offer_terms,
            violation_message="Counter offer must include a new amount or terms",
            applicable_domains=domains,
            applicable_intent_names=frozenset({BiddingIntent.COUNTER_BID.value}),
        ),
    ]


class BiddingGuard(IntentGuard):
    """Guard for the bidding domain.

    Example::

        guard = BiddingGuard(BiddingGuardConfig(max_bid_amount=10_000))
        result = await guard.validate_intent(
            ModelIntent(
                name="submitBid",
                params={"projectId": "p1", "amount": 5000, ...},
                source_domain="bidding",
                caller_id="c1",
                caller_roles={"contractor"},
                correlation_id=correlation_id,
            )
        )
    """

    def __init__(
        self,
        config: BiddingGuardConfig | None = None,
        *,
        owner_config: ModelOwnerIdConfig | None = None,
        domain_config: ModelDomainBoundaryConfig | None = None,
        settings: GuardSettings | None = None,
    ) -> None:
        self._bidding_config = config or BiddingGuardConfig()
        settings = settings or GuardSettings()
        if self._bidding_config.log_validation and not settings.log_validation:
            settings = settings.model_copy(update={"log_validation": True})
        super().__init__(
            domain=BIDDING_DOMAIN,
            role_permissions=BIDDING_ROLE_PERMISSIONS,
            patterns=[
                *create_bidding_patterns(self._bidding_config),
                *self._bidding_config.additional_patterns,
            ],
            owner_config=owner_config,
            domain_config=domain_config,
            known_intents=[i.value for i in BiddingIntent],
            settings=settings,
        )

    @property
    def bidding_config(self) -> BiddingGuardConfig:
        return self._bidding_config

    async def validate_result(
        self, result: ModelIntentResult, intent: ModelIntent
    ) -> ModelValidationResult:
        """Check that bid-returning intents return the stored bid."""
        if not result.success or intent.name not in _BID_RETURNING_INTENTS:
            return ModelValidationResult.passed(intent)
        has_id = isinstance(result.data, Mapping) and bool(result.data.get("id"))
        outcome = ModelValidationOutcome(
            pattern_id="bidding:result_has_bid_id",
            pattern_name="Result Has Bid ID",
            severity=EnumPatternSeverity.ERROR,
            valid=has_id,
            message=None if has_id else f"{intent.name} result must include the bid id",
        )
        return ModelValidationResult.from_outcomes([outcome], intent)


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
