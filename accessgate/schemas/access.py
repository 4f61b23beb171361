"""Access status schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccessStatusResponse(CamelModel):
    """Read-only access status used by the client to render banners and redirects."""

    found: bool
    has_access: bool
    onboarding_complete: bool
    has_subscription: bool
    onboarding_step: int | None = None
    onboarding_percent: int = 0
    is_privileged: bool = False
    account_id: UUID | None = None
    email: str | None = None
    full_name: str | None = None
    role: str | None = None
    subscription_status: str | None = None
    subscription_end_date: datetime | None = None
    plan_name: str | None = None
    code: str | None = None
    redirect_to: str | None = None


class AccessDeniedResponse(CamelModel):
    """Structured rejection returned by the access gates."""

    success: bool = False
    code: str
    message: str
    redirect_to: str | None = None
