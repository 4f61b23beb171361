"""Client dashboard endpoints."""

from uuid import UUID

from fastapi import APIRouter

from accessgate.dependencies import FullAccessAccount
from accessgate.schemas.access import CamelModel

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


class DashboardResponse(CamelModel):
    """Dashboard header data."""

    success: bool = True
    account_id: UUID
    full_name: str | None = None
    role: str
    plan_name: str | None = None


@router.get("", response_model=DashboardResponse)
async def get_dashboard(account: FullAccessAccount) -> DashboardResponse:
    """
    Dashboard for accounts with full access.

    Uses the account resolved by the gate; no second lookup.
    """
    return DashboardResponse(
        account_id=account.account_id,
        full_name=account.full_name,
        role=account.role,
        plan_name=account.plan_name,
    )
