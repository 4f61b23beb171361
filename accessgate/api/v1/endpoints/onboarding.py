"""Onboarding endpoints."""

from fastapi import APIRouter

from accessgate.config import settings
from accessgate.core.access import AccountStatus
from accessgate.core.exceptions import BadRequestException
from accessgate.dependencies import CurrentAccount, DatabaseSession
from accessgate.schemas.onboarding import (
    OnboardingStatusResponse,
    OnboardingSteps,
    SaveProgressRequest,
)
from accessgate.services.onboarding_service import OnboardingService

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


def _onboarding_response(state: dict) -> OnboardingStatusResponse:
    return OnboardingStatusResponse(
        onboarding_completed=state["onboarding_completed"],
        onboarding_completed_at=state["onboarding_completed_at"],
        status=state["status"],
        current_step=state["current_step"],
        percent_complete=state["percent_complete"],
        steps=OnboardingSteps(**state["steps"]),
        redirect_to=None if state["onboarding_completed"] else settings.onboarding_redirect,
    )


def _require_client(account: AccountStatus) -> None:
    if account.is_privileged:
        raise BadRequestException("Onboarding applies to client accounts only")


@router.get("/status", response_model=OnboardingStatusResponse)
async def get_onboarding_status(
    db: DatabaseSession,
    account: CurrentAccount,
) -> OnboardingStatusResponse:
    """Get the current account's onboarding state and wizard progress."""
    state = await OnboardingService.get_onboarding_state(db, account.account_id)
    return _onboarding_response(state)


@router.post("/save-progress", response_model=OnboardingStatusResponse)
async def save_onboarding_progress(
    payload: SaveProgressRequest,
    db: DatabaseSession,
    account: CurrentAccount,
) -> OnboardingStatusResponse:
    """Save a submitted wizard step so the client can resume later."""
    _require_client(account)

    state = await OnboardingService.save_progress(
        db, account.account_id, payload.step, payload.data
    )
    return _onboarding_response(state)


@router.post("/complete", response_model=OnboardingStatusResponse)
async def complete_onboarding(
    db: DatabaseSession,
    account: CurrentAccount,
) -> OnboardingStatusResponse:
    """
    Mark the current client's onboarding as completed.

    The client must pay for a plan first: completion is refused unless a
    subscription currently qualifies.
    """
    _require_client(account)

    if not account.has_qualifying_subscription:
        raise BadRequestException("Select and pay for a plan before completing onboarding")

    state = await OnboardingService.complete_onboarding(db, account.account_id)
    return _onboarding_response(state)
