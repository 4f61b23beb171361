"""Access status projection for client display."""

from sqlalchemy.ext.asyncio import AsyncSession

from accessgate.core.access import FULL_ACCESS, evaluate_access, evaluate_gate
from accessgate.schemas.access import AccessStatusResponse
from accessgate.services.account_status_service import AccountStatusReader


class AccessStatusService:
    """Builds the non-enforcing access status shown by the client."""

    def __init__(self, reader: AccountStatusReader | None = None):
        """Initialize service with an optional account status reader."""
        self.reader = reader or AccountStatusReader()

    async def get_access_status(
        self,
        db: AsyncSession,
        subject_id: str | None,
    ) -> AccessStatusResponse:
        """
        Report a subject's onboarding, subscription and overall access state.

        ``has_access`` uses the same rule as the full-access gate. An unknown
        subject yields ``found=False`` instead of an error. Wizard progress
        is reported as the current step and a percentage.

        Args:
            db: Database session
            subject_id: Identity provider subject, or None if unauthenticated

        Returns:
            Access status projection

        Raises:
            AccountStoreError: If the account store cannot be read
        """
        account = await self.reader.read(db, subject_id) if subject_id else None

        if account is None:
            decision = evaluate_access(subject_id, None, FULL_ACCESS)
            return AccessStatusResponse(
                found=False,
                has_access=False,
                onboarding_complete=False,
                has_subscription=False,
                code=decision.code,
                redirect_to=decision.redirect_to,
            )

        decision = evaluate_gate(
            account.role,
            account.onboarding_completed,
            account.has_qualifying_subscription,
            FULL_ACCESS,
        )

        return AccessStatusResponse(
            found=True,
            has_access=decision.allowed,
            onboarding_complete=account.onboarding_completed,
            has_subscription=account.has_qualifying_subscription,
            onboarding_step=account.onboarding_step,
            onboarding_percent=account.onboarding_percent,
            is_privileged=account.is_privileged,
            account_id=account.account_id,
            email=account.email,
            full_name=account.full_name,
            role=account.role,
            subscription_status=account.subscription_status,
            subscription_end_date=account.subscription_period_end,
            plan_name=account.plan_name,
            code=decision.code,
            redirect_to=decision.redirect_to,
        )
