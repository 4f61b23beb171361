"""Onboarding schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from accessgate.core.onboarding import TOTAL_ONBOARDING_STEPS
from accessgate.schemas.access import CamelModel


class OnboardingSteps(CamelModel):
    """Completion flag of each wizard step."""

    personal_info: bool = False
    current_address: bool = False
    address_history: bool = False
    employment: bool = False
    documents: bool = False
    authorizations: bool = False
    signature: bool = False


class OnboardingStatusResponse(CamelModel):
    """Onboarding state of the current account."""

    onboarding_completed: bool
    onboarding_completed_at: datetime | None = None
    status: str = "not_started"
    current_step: int = 1
    total_steps: int = TOTAL_ONBOARDING_STEPS
    percent_complete: int = 0
    steps: OnboardingSteps = Field(default_factory=OnboardingSteps)
    redirect_to: str | None = None


class SaveProgressRequest(CamelModel):
    """Submitted wizard step and the answers entered so far."""

    step: int = Field(..., ge=1, le=TOTAL_ONBOARDING_STEPS)
    data: dict[str, Any] = Field(default_factory=dict)
