"""FastAPI dependencies."""

from collections.abc import Awaitable, Callable
from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from accessgate.core.access import (
    FULL_ACCESS,
    AccessCheck,
    AccountStatus,
    evaluate_access,
)
from accessgate.core.exceptions import AccessDeniedException, AccountStoreError, ForbiddenException
from accessgate.core.security import subject_from_token
from accessgate.database import get_db
from accessgate.services.account_status_service import AccountStatusReader

logger = structlog.get_logger()

# Missing credentials are reported by the access gates, not by the scheme
security = HTTPBearer(auto_error=False)


async def get_subject_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """
    Extract the verified subject identifier from the bearer token.

    Returns:
        The token's ``sub`` claim, or None if the token is missing or invalid
    """
    return subject_from_token(credentials.credentials if credentials else None)


def get_account_status_reader() -> AccountStatusReader:
    """Get the account status reader."""
    return AccountStatusReader()


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
SubjectId = Annotated[str | None, Depends(get_subject_id)]
AccountReader = Annotated[AccountStatusReader, Depends(get_account_status_reader)]


def require_access(*checks: AccessCheck) -> Callable[..., Awaitable[AccountStatus]]:
    """
    Build a gate dependency requiring the given lifecycle checks.

    With no checks the gate only requires an authenticated, known account.
    On success the resolved account is returned and stored on
    ``request.state.account``; on denial ``AccessDeniedException`` is raised.

    Args:
        checks: Checks the protected resource requires

    Returns:
        FastAPI dependency
    """
    required_checks = frozenset(checks)
    check_names = sorted(check.value for check in required_checks)

    async def gate(
        request: Request,
        subject_id: SubjectId,
        db: DatabaseSession,
        reader: AccountReader,
    ) -> AccountStatus:
        account = None
        if subject_id:
            try:
                account = await reader.read(db, subject_id)
            except AccountStoreError:
                logger.error(
                    "access_check_failed",
                    subject_id=subject_id,
                    checks=check_names,
                    path=request.url.path,
                    exc_info=True,
                )
                raise

        decision = evaluate_access(subject_id, account, required_checks)

        if account is None or not decision.allowed:
            logger.info(
                "access_denied",
                subject_id=subject_id,
                code=decision.code,
                checks=check_names,
                path=request.url.path,
            )
            raise AccessDeniedException(decision)

        request.state.account = account
        return account

    return gate


get_current_account = require_access()
check_onboarding = require_access(AccessCheck.ONBOARDING)
check_subscription = require_access(AccessCheck.SUBSCRIPTION)
require_full_access = require_access(*FULL_ACCESS)


async def require_privileged(
    account: Annotated[AccountStatus, Depends(get_current_account)],
) -> AccountStatus:
    """
    Dependency to ensure the current account is staff or admin.

    Raises:
        ForbiddenException: If the account is a client
    """
    if not account.is_privileged:
        raise ForbiddenException("Staff access required")
    return account


# Type aliases for dependency injection
CurrentAccount = Annotated[AccountStatus, Depends(get_current_account)]
OnboardedAccount = Annotated[AccountStatus, Depends(check_onboarding)]
SubscribedAccount = Annotated[AccountStatus, Depends(check_subscription)]
FullAccessAccount = Annotated[AccountStatus, Depends(require_full_access)]
PrivilegedAccount = Annotated[AccountStatus, Depends(require_privileged)]
