"""Access status endpoints."""

import structlog
from fastapi import APIRouter

from accessgate.core.exceptions import AccountStoreError
from accessgate.dependencies import AccountReader, DatabaseSession, SubjectId
from accessgate.schemas.access import AccessStatusResponse
from accessgate.services.access_status_service import AccessStatusService

router = APIRouter(tags=["Access"])
logger = structlog.get_logger()


async def _access_status(
    db: DatabaseSession,
    reader: AccountReader,
    subject_id: str | None,
) -> AccessStatusResponse:
    service = AccessStatusService(reader)
    try:
        return await service.get_access_status(db, subject_id)
    except AccountStoreError:
        logger.error("access_status_failed", subject_id=subject_id, exc_info=True)
        raise


@router.get(
    "/access/status",
    response_model=AccessStatusResponse,
    response_model_by_alias=True,
    summary="Access status of the current caller",
)
async def get_my_access_status(
    db: DatabaseSession,
    reader: AccountReader,
    subject_id: SubjectId,
) -> AccessStatusResponse:
    """
    Report onboarding, subscription and overall access for the caller.

    Never denies: an unauthenticated or unknown caller gets ``found=false``
    with the corresponding code.
    """
    return await _access_status(db, reader, subject_id)


@router.get(
    "/subscriptions/access-status",
    response_model=AccessStatusResponse,
    response_model_by_alias=True,
    summary="Access status of the current caller (legacy path)",
)
async def get_subscription_access_status(
    db: DatabaseSession,
    reader: AccountReader,
    subject_id: SubjectId,
) -> AccessStatusResponse:
    """Same projection as ``/access/status``, kept on the billing path."""
    return await _access_status(db, reader, subject_id)
