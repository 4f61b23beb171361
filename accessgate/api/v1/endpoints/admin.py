"""Staff-only endpoints."""

import structlog
from fastapi import APIRouter

from accessgate.core.exceptions import AccountStoreError
from accessgate.dependencies import AccountReader, DatabaseSession, PrivilegedAccount
from accessgate.schemas.access import AccessStatusResponse
from accessgate.services.access_status_service import AccessStatusService

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = structlog.get_logger()


@router.get(
    "/access-status/{subject_id}",
    response_model=AccessStatusResponse,
    summary="Access status of any account (staff only)",
)
async def get_account_access_status(
    subject_id: str,
    db: DatabaseSession,
    reader: AccountReader,
    staff_account: PrivilegedAccount,
) -> AccessStatusResponse:
    """
    Inspect another account's access state.

    Args:
        subject_id: Identity provider subject of the account to inspect
        db: Database session
        reader: Account status reader
        staff_account: Authenticated staff or admin account

    Returns:
        Access status projection for the subject
    """
    service = AccessStatusService(reader)
    try:
        return await service.get_access_status(db, subject_id)
    except AccountStoreError:
        logger.error(
            "access_status_failed",
            subject_id=subject_id,
            requested_by=str(staff_account.account_id),
            exc_info=True,
        )
        raise
