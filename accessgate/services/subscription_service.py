"""Subscription and plan service for business logic."""

from datetime import UTC, datetime
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accessgate.core.access import is_qualifying_subscription
from accessgate.core.exceptions import AccountStoreError
from accessgate.models.subscriptions import client_subscriptions, subscription_plans

logger = structlog.get_logger()


class SubscriptionService:
    """Service for plan and subscription reads."""

    @staticmethod
    async def list_active_plans(db: AsyncSession) -> list[dict]:
        """List plans available for purchase."""
        query = (
            select(
                subscription_plans.c.id,
                subscription_plans.c.name,
                subscription_plans.c.description,
                subscription_plans.c.price_monthly,
            )
            .where(subscription_plans.c.is_active.is_(True))
            .order_by(subscription_plans.c.sort_order, subscription_plans.c.price_monthly)
        )
        try:
            result = await db.execute(query)
            rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as e:
            logger.error("plan_list_failed", exc_info=True)
            raise AccountStoreError("Unable to load plans") from e

        return [dict(row) for row in rows]

    @staticmethod
    async def get_latest_subscription(
        db: AsyncSession,
        account_id: UUID,
        now: datetime | None = None,
    ) -> dict | None:
        """
        Get the most recently created subscription record of an account.

        Args:
            db: Database session
            account_id: Client account ID
            now: Reference time for the ``qualifies`` flag (defaults to now)

        Returns:
            Subscription data with plan name and ``qualifies`` flag, or None

        Raises:
            AccountStoreError: If the account store cannot be read
        """
        query = (
            select(
                client_subscriptions.c.id,
                client_subscriptions.c.status,
                client_subscriptions.c.current_period_start,
                client_subscriptions.c.current_period_end,
                client_subscriptions.c.cancel_at_period_end,
                client_subscriptions.c.plan_id,
                subscription_plans.c.name.label("plan_name"),
            )
            .select_from(
                client_subscriptions.outerjoin(
                    subscription_plans,
                    subscription_plans.c.id == client_subscriptions.c.plan_id,
                )
            )
            .where(client_subscriptions.c.client_id == account_id)
            .order_by(client_subscriptions.c.created_at.desc())
            .limit(1)
        )
        try:
            result = await db.execute(query)
            row = result.mappings().first()
        except (SQLAlchemyError, OSError) as e:
            logger.error("subscription_read_failed", account_id=str(account_id), exc_info=True)
            raise AccountStoreError("Unable to load subscription") from e

        if not row:
            return None

        subscription = dict(row)
        subscription["qualifies"] = is_qualifying_subscription(
            subscription["status"],
            subscription["current_period_end"],
            now or datetime.now(UTC),
        )
        return subscription
