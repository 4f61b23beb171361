"""Account status reader for access decisions."""

from sqlalchemy import Integer, Select, cast, func, literal, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accessgate.core.access import QUALIFYING_SUBSCRIPTION_STATUSES, AccountStatus
from accessgate.core.exceptions import AccountStoreError
from accessgate.core.onboarding import ONBOARDING_STEPS
from accessgate.models.client_profiles import client_profiles
from accessgate.models.onboarding_progress import onboarding_progress
from accessgate.models.subscriptions import client_subscriptions, subscription_plans
from accessgate.models.users import users


def build_account_status_query(subject_id: str) -> Select:
    """
    Build the single statement that reads both gating facts for a subject.

    Onboarding state, the qualifying-subscription flag and the latest
    subscription snapshot come from one statement, so they always reflect
    the same database snapshot.
    """
    has_qualifying_subscription = (
        select(client_subscriptions.c.id)
        .where(
            client_subscriptions.c.client_id == users.c.id,
            client_subscriptions.c.status.in_(QUALIFYING_SUBSCRIPTION_STATUSES),
            client_subscriptions.c.current_period_end > func.now(),
        )
        .exists()
    )

    latest_subscription = (
        select(
            client_subscriptions.c.id,
            client_subscriptions.c.status,
            client_subscriptions.c.current_period_end,
            client_subscriptions.c.plan_id,
        )
        .where(client_subscriptions.c.client_id == users.c.id)
        .order_by(client_subscriptions.c.created_at.desc())
        .limit(1)
        .lateral("latest_subscription")
    )

    steps_completed = sum(
        (
            func.coalesce(cast(onboarding_progress.c[step.column], Integer), 0)
            for step in ONBOARDING_STEPS
        ),
        literal(0),
    )

    return (
        select(
            users.c.id.label("account_id"),
            users.c.auth0_id,
            users.c.role,
            users.c.email,
            users.c.full_name,
            client_profiles.c.onboarding_completed,
            onboarding_progress.c.current_step.label("onboarding_step"),
            steps_completed.label("onboarding_steps_completed"),
            has_qualifying_subscription.label("has_qualifying_subscription"),
            latest_subscription.c.id.label("subscription_id"),
            latest_subscription.c.status.label("subscription_status"),
            latest_subscription.c.current_period_end.label("subscription_period_end"),
            latest_subscription.c.plan_id,
            subscription_plans.c.name.label("plan_name"),
        )
        .select_from(
            users.outerjoin(client_profiles, client_profiles.c.user_id == users.c.id)
            .outerjoin(onboarding_progress, onboarding_progress.c.client_id == users.c.id)
            .outerjoin(latest_subscription, true())
            .outerjoin(
                subscription_plans,
                subscription_plans.c.id == latest_subscription.c.plan_id,
            )
        )
        .where(users.c.auth0_id == subject_id)
    )


class AccountStatusReader:
    """Resolves a subject identifier to the facts the access gates need."""

    async def read(self, db: AsyncSession, subject_id: str) -> AccountStatus | None:
        """
        Read account status for an external subject identifier.

        Args:
            db: Database session
            subject_id: Identity provider subject (already verified upstream)

        Returns:
            Account status, or None if no account matches

        Raises:
            AccountStoreError: If the account store cannot be read
        """
        query = build_account_status_query(subject_id)

        try:
            result = await db.execute(query)
            row = result.mappings().first()
        except (SQLAlchemyError, OSError) as e:
            raise AccountStoreError() from e

        if not row:
            return None

        return AccountStatus(
            account_id=row["account_id"],
            external_subject_id=row["auth0_id"],
            role=row["role"],
            email=row["email"],
            full_name=row["full_name"],
            onboarding_completed=bool(row["onboarding_completed"]),
            has_qualifying_subscription=bool(row["has_qualifying_subscription"]),
            subscription_id=row["subscription_id"],
            subscription_status=row["subscription_status"],
            subscription_period_end=row["subscription_period_end"],
            plan_id=row["plan_id"],
            plan_name=row["plan_name"],
            onboarding_step=row["onboarding_step"],
            onboarding_steps_completed=row["onboarding_steps_completed"] or 0,
        )
