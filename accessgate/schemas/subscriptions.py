"""Subscription and plan schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from accessgate.schemas.access import CamelModel


class PlanResponse(CamelModel):
    """Subscription plan shown on the pricing page."""

    id: UUID
    name: str
    description: str | None = None
    price_monthly: Decimal


class PlanListResponse(CamelModel):
    """List of active plans."""

    plans: list[PlanResponse]


class SubscriptionResponse(CamelModel):
    """Most recent subscription record of an account."""

    id: UUID
    status: str
    current_period_start: datetime | None = None
    current_period_end: datetime | None = None
    cancel_at_period_end: bool = False
    plan_id: UUID | None = None
    plan_name: str | None = None
    qualifies: bool


class CurrentSubscriptionResponse(CamelModel):
    """Current subscription wrapper; ``subscription`` is None if the account has none."""

    subscription: SubscriptionResponse | None = None
