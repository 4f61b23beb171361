"""Plan and subscription endpoints."""

from fastapi import APIRouter

from accessgate.dependencies import CurrentAccount, DatabaseSession
from accessgate.schemas.subscriptions import (
    CurrentSubscriptionResponse,
    PlanListResponse,
    PlanResponse,
    SubscriptionResponse,
)
from accessgate.services.subscription_service import SubscriptionService

router = APIRouter(tags=["Subscriptions"])


@router.get("/plans", response_model=PlanListResponse)
async def list_plans(db: DatabaseSession) -> PlanListResponse:
    """List the plans shown on the pricing page."""
    plans = await SubscriptionService.list_active_plans(db)
    return PlanListResponse(plans=[PlanResponse.model_validate(plan) for plan in plans])


@router.get("/subscriptions/current", response_model=CurrentSubscriptionResponse)
async def get_current_subscription(
    db: DatabaseSession,
    account: CurrentAccount,
) -> CurrentSubscriptionResponse:
    """
    Get the caller's most recent subscription record.

    Only authentication is required: clients pay for a plan before they
    finish onboarding, so the record must be visible before either gate
    passes. Staff and admin accounts usually have no subscription.
    """
    subscription = await SubscriptionService.get_latest_subscription(db, account.account_id)

    if subscription is None:
        return CurrentSubscriptionResponse(subscription=None)

    return CurrentSubscriptionResponse(
        subscription=SubscriptionResponse.model_validate(subscription),
    )
