"""Onboarding service for business logic."""

from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accessgate.core.exceptions import AccountStoreError
from accessgate.core.onboarding import (
    ONBOARDING_STEPS,
    TOTAL_ONBOARDING_STEPS,
    get_onboarding_step,
    onboarding_percent,
)
from accessgate.models.client_profiles import client_profiles
from accessgate.models.onboarding_progress import onboarding_progress
from accessgate.models.users import users

logger = structlog.get_logger()


def _onboarding_state(row: Any | None) -> dict:
    """Shape a profile/progress row into the onboarding state dict."""
    if not row:
        return {
            "onboarding_completed": False,
            "onboarding_completed_at": None,
            "status": "not_started",
            "current_step": 1,
            "steps": {step.name: False for step in ONBOARDING_STEPS},
            "percent_complete": 0,
        }

    completed = bool(row["onboarding_completed"])
    steps = {step.name: bool(row[step.column]) for step in ONBOARDING_STEPS}

    if completed:
        status = "completed"
    else:
        status = row["status"] or "not_started"

    return {
        "onboarding_completed": completed,
        "onboarding_completed_at": row["onboarding_completed_at"],
        "status": status,
        "current_step": row["current_step"] or 1,
        "steps": steps,
        "percent_complete": onboarding_percent(sum(steps.values()), completed),
    }


class OnboardingService:
    """Service for onboarding state and wizard progress."""

    @staticmethod
    async def get_onboarding_state(db: AsyncSession, account_id: UUID) -> dict:
        """
        Get onboarding state and wizard progress.

        A missing profile counts as not completed; a missing progress row
        counts as not started.

        Raises:
            AccountStoreError: If the account store cannot be read
        """
        query = (
            select(
                client_profiles.c.onboarding_completed,
                client_profiles.c.onboarding_completed_at,
                onboarding_progress.c.status,
                onboarding_progress.c.current_step,
                *(onboarding_progress.c[step.column] for step in ONBOARDING_STEPS),
            )
            .select_from(
                users.outerjoin(client_profiles, client_profiles.c.user_id == users.c.id)
                .outerjoin(onboarding_progress, onboarding_progress.c.client_id == users.c.id)
            )
            .where(users.c.id == account_id)
        )

        try:
            result = await db.execute(query)
            row = result.mappings().first()
        except (SQLAlchemyError, OSError) as e:
            logger.error("onboarding_read_failed", account_id=str(account_id), exc_info=True)
            raise AccountStoreError("Unable to load onboarding state") from e

        return _onboarding_state(row)

    @staticmethod
    async def save_progress(
        db: AsyncSession,
        account_id: UUID,
        step: int,
        data: dict[str, Any] | None = None,
    ) -> dict:
        """
        Record that a wizard step was submitted.

        The current step never moves backwards and a step's first completion
        timestamp is kept.

        Args:
            db: Database session
            account_id: Client account ID
            step: Submitted step, 1-7
            data: Form answers to keep between sessions

        Returns:
            Onboarding state after the update

        Raises:
            ValueError: If the step is out of range
            AccountStoreError: If the account store cannot be written
        """
        wizard_step = get_onboarding_step(step)
        step_completed_at = onboarding_progress.c[wizard_step.completed_at_column]

        stmt = insert(onboarding_progress).values(
            client_id=account_id,
            current_step=step,
            form_data=data,
            **{wizard_step.column: True, wizard_step.completed_at_column: func.now()},
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[onboarding_progress.c.client_id],
            set_={
                "current_step": func.greatest(onboarding_progress.c.current_step, step),
                "form_data": stmt.excluded.form_data,
                wizard_step.column: True,
                wizard_step.completed_at_column: func.coalesce(step_completed_at, func.now()),
                "last_activity_at": func.now(),
                "updated_at": func.now(),
            },
        )

        try:
            await db.execute(stmt)
            await db.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "onboarding_progress_save_failed",
                account_id=str(account_id),
                step=step,
                exc_info=True,
            )
            raise AccountStoreError("Unable to save onboarding progress") from e

        logger.info("onboarding_progress_saved", account_id=str(account_id), step=step)
        return await OnboardingService.get_onboarding_state(db, account_id)

    @staticmethod
    async def complete_onboarding(db: AsyncSession, account_id: UUID) -> dict:
        """
        Mark onboarding as completed.

        Completion is one-way. Repeating the call keeps the original
        completion timestamp. The wizard row is closed out in the same
        transaction.

        Args:
            db: Database session
            account_id: Client account ID

        Returns:
            Onboarding state after the update

        Raises:
            AccountStoreError: If the account store cannot be written
        """
        profile_stmt = insert(client_profiles).values(
            user_id=account_id,
            onboarding_completed=True,
            onboarding_completed_at=func.now(),
        )
        profile_stmt = profile_stmt.on_conflict_do_update(
            index_elements=[client_profiles.c.user_id],
            set_={
                "onboarding_completed": True,
                "onboarding_completed_at": func.coalesce(
                    client_profiles.c.onboarding_completed_at,
                    func.now(),
                ),
                "updated_at": func.now(),
            },
        )

        all_steps: dict[str, Any] = {}
        for step in ONBOARDING_STEPS:
            all_steps[step.column] = True
            all_steps[step.completed_at_column] = func.coalesce(
                onboarding_progress.c[step.completed_at_column], func.now()
            )

        progress_stmt = insert(onboarding_progress).values(
            client_id=account_id,
            current_step=TOTAL_ONBOARDING_STEPS,
            status="completed",
            completed_at=func.now(),
            **{step.column: True for step in ONBOARDING_STEPS},
            **{step.completed_at_column: func.now() for step in ONBOARDING_STEPS},
        )
        progress_stmt = progress_stmt.on_conflict_do_update(
            index_elements=[onboarding_progress.c.client_id],
            set_={
                "current_step": TOTAL_ONBOARDING_STEPS,
                "status": "completed",
                "completed_at": func.coalesce(onboarding_progress.c.completed_at, func.now()),
                **all_steps,
                "updated_at": func.now(),
            },
        )

        try:
            await db.execute(profile_stmt)
            await db.execute(progress_stmt)
            await db.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error("onboarding_complete_failed", account_id=str(account_id), exc_info=True)
            raise AccountStoreError("Unable to complete onboarding") from e

        logger.info("onboarding_completed", account_id=str(account_id))
        return await OnboardingService.get_onboarding_state(db, account_id)
