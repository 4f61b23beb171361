"""Access decisions for onboarding- and subscription-gated resources.

Every gate in the API and the non-enforcing status projection go through the
functions in this module, so the role bypass, the check ordering and the
denial-to-redirect mapping are defined exactly once.

Rules, first match wins:

1. no verified subject                      -> UNAUTHENTICATED
2. no account for the subject               -> NOT_FOUND
3. privileged role (admin, staff)           -> ALLOW
4. onboarding required but not completed    -> ONBOARDING_INCOMPLETE
5. subscription required but none qualifies -> NO_ACTIVE_SUBSCRIPTION
6. otherwise                                -> ALLOW
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from accessgate.config import settings
from accessgate.core.onboarding import onboarding_percent


class Role(StrEnum):
    """Account roles."""

    CLIENT = "client"
    STAFF = "staff"
    ADMIN = "admin"


PRIVILEGED_ROLES: frozenset[str] = frozenset({Role.ADMIN, Role.STAFF})


def is_privileged_role(role: str | None) -> bool:
    """Return True for roles that bypass onboarding and subscription checks."""
    return role in PRIVILEGED_ROLES


class AccessCheck(StrEnum):
    """Lifecycle checks a gate can require."""

    ONBOARDING = "onboarding"
    SUBSCRIPTION = "subscription"


FULL_ACCESS: frozenset[AccessCheck] = frozenset({AccessCheck.ONBOARDING, AccessCheck.SUBSCRIPTION})

QUALIFYING_SUBSCRIPTION_STATUSES: tuple[str, ...] = ("active", "trialing")


def is_qualifying_subscription(
    status: str | None,
    current_period_end: datetime | None,
    now: datetime,
) -> bool:
    """
    Check whether a single subscription record grants access at ``now``.

    Args:
        status: Subscription status
        current_period_end: End of the current billing period (timezone-aware)
        now: Reference time (timezone-aware)

    Returns:
        True if the status is active or trialing and the period has not ended
    """
    if status not in QUALIFYING_SUBSCRIPTION_STATUSES or current_period_end is None:
        return False
    return current_period_end > now


class DenialReason(StrEnum):
    """Machine-readable denial codes."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    NOT_FOUND = "NOT_FOUND"
    ONBOARDING_INCOMPLETE = "ONBOARDING_INCOMPLETE"
    NO_ACTIVE_SUBSCRIPTION = "NO_ACTIVE_SUBSCRIPTION"


@dataclass(frozen=True)
class DenialRule:
    """How a denial is presented to the client."""

    status_code: int
    message: str
    redirect_to: str | None


DENIAL_RULES: dict[DenialReason, DenialRule] = {
    DenialReason.UNAUTHENTICATED: DenialRule(
        status_code=401,
        message="Authentication required",
        redirect_to=None,
    ),
    DenialReason.NOT_FOUND: DenialRule(
        status_code=404,
        message="Account not found",
        redirect_to=None,
    ),
    DenialReason.ONBOARDING_INCOMPLETE: DenialRule(
        status_code=403,
        message="You must complete onboarding before continuing",
        redirect_to=settings.onboarding_redirect,
    ),
    DenialReason.NO_ACTIVE_SUBSCRIPTION: DenialRule(
        status_code=403,
        message="An active subscription is required to access this resource",
        redirect_to=settings.pricing_redirect,
    ),
}


@dataclass(frozen=True)
class Decision:
    """Outcome of an access evaluation. ``reason`` is None when allowed."""

    reason: DenialReason | None = None

    @property
    def allowed(self) -> bool:
        return self.reason is None

    @property
    def code(self) -> str | None:
        return self.reason.value if self.reason else None

    @property
    def rule(self) -> DenialRule | None:
        return DENIAL_RULES[self.reason] if self.reason else None

    @property
    def redirect_to(self) -> str | None:
        return self.rule.redirect_to if self.rule else None


ALLOW = Decision()


@dataclass(frozen=True)
class AccountStatus:
    """Normalized account facts produced by the account status reader."""

    account_id: UUID
    external_subject_id: str
    role: str
    onboarding_completed: bool
    has_qualifying_subscription: bool
    email: str | None = None
    full_name: str | None = None
    # Most recent subscription record, for display only
    subscription_id: UUID | None = None
    subscription_status: str | None = None
    subscription_period_end: datetime | None = None
    plan_id: UUID | None = None
    plan_name: str | None = None
    # Onboarding wizard progress, for display only
    onboarding_step: int | None = None
    onboarding_steps_completed: int = 0

    @property
    def is_privileged(self) -> bool:
        return is_privileged_role(self.role)

    @property
    def onboarding_percent(self) -> int:
        return onboarding_percent(self.onboarding_steps_completed, self.onboarding_completed)


def evaluate_gate(
    role: str | None,
    onboarding_completed: bool,
    has_qualifying_subscription: bool,
    required_checks: Iterable[AccessCheck],
) -> Decision:
    """
    Decide access for a known account.

    Args:
        role: Account role
        onboarding_completed: Whether onboarding has been completed
        has_qualifying_subscription: Whether any subscription currently qualifies
        required_checks: Checks the resource requires

    Returns:
        ALLOW, or a denial for the first unsatisfied check (onboarding first)
    """
    if is_privileged_role(role):
        return ALLOW

    checks = frozenset(required_checks)
    if AccessCheck.ONBOARDING in checks and not onboarding_completed:
        return Decision(DenialReason.ONBOARDING_INCOMPLETE)
    if AccessCheck.SUBSCRIPTION in checks and not has_qualifying_subscription:
        return Decision(DenialReason.NO_ACTIVE_SUBSCRIPTION)
    return ALLOW


def evaluate_access(
    subject_id: str | None,
    account: AccountStatus | None,
    required_checks: Iterable[AccessCheck],
) -> Decision:
    """Apply the full ordered rule set to a request's subject and account."""
    if not subject_id:
        return Decision(DenialReason.UNAUTHENTICATED)
    if account is None:
        return Decision(DenialReason.NOT_FOUND)
    return evaluate_gate(
        account.role,
        account.onboarding_completed,
        account.has_qualifying_subscription,
        required_checks,
    )
