"""Database models."""

from sqlalchemy import MetaData

from accessgate.models.client_profiles import client_profiles
from accessgate.models.client_profiles import metadata as client_profiles_metadata
from accessgate.models.onboarding_progress import metadata as onboarding_progress_metadata
from accessgate.models.onboarding_progress import onboarding_progress
from accessgate.models.subscriptions import client_subscriptions, subscription_plans
from accessgate.models.subscriptions import metadata as subscriptions_metadata
from accessgate.models.users import metadata as users_metadata
from accessgate.models.users import users

# Combined metadata for create_all (foreign keys span modules)
metadata = MetaData()
for _source in (
    users_metadata,
    client_profiles_metadata,
    onboarding_progress_metadata,
    subscriptions_metadata,
):
    for _table in _source.tables.values():
        _table.to_metadata(metadata)

__all__ = [
    "client_profiles",
    "client_subscriptions",
    "metadata",
    "onboarding_progress",
    "subscription_plans",
    "users",
]
