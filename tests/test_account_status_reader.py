"""Tests for the account status reader."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from conftest import mock_result
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from accessgate.core.exceptions import AccountStoreError
from accessgate.services.account_status_service import (
    AccountStatusReader,
    build_account_status_query,
)


def account_row(**overrides) -> dict:
    row = {
        "account_id": uuid4(),
        "auth0_id": "auth0|abc",
        "role": "client",
        "email": "client@example.com",
        "full_name": "Test Client",
        "onboarding_completed": True,
        "has_qualifying_subscription": True,
        "subscription_id": uuid4(),
        "subscription_status": "active",
        "subscription_period_end": datetime.now(UTC) + timedelta(days=30),
        "plan_id": uuid4(),
        "plan_name": "Professional",
        "onboarding_step": 7,
        "onboarding_steps_completed": 7,
    }
    row.update(overrides)
    return row


class TestAccountStatusQuery:
    """Tests for the combined status statement."""

    def compile(self, subject_id: str = "auth0|abc"):
        return build_account_status_query(subject_id).compile(dialect=postgresql.dialect())

    def test_reads_both_facts_in_one_statement(self):
        """Onboarding, qualification and the snapshot come from a single SELECT."""
        sql = str(self.compile())

        assert sql.count("SELECT") >= 1
        assert "LEFT OUTER JOIN client_profiles" in sql
        assert "EXISTS" in sql
        assert "LATERAL" in sql
        assert "subscription_plans" in sql
        assert "LEFT OUTER JOIN onboarding_progress" in sql

    def test_qualifying_subscription_uses_database_clock(self):
        sql = str(self.compile())
        assert "now()" in sql
        assert "client_subscriptions.current_period_end >" in sql

    def test_filters_by_subject(self):
        compiled = self.compile("auth0|xyz")
        assert "auth0|xyz" in compiled.params.values()

    def test_qualifying_statuses_bound(self):
        compiled = self.compile()
        values = [
            value for value in compiled.params.values() if isinstance(value, list | tuple)
        ]
        assert ["active", "trialing"] in [list(value) for value in values]


@pytest.mark.asyncio
class TestAccountStatusReader:
    """Tests for AccountStatusReader.read."""

    async def test_maps_row_to_account_status(self, db_session):
        row = account_row()
        db_session.execute.return_value = mock_result(row)

        account = await AccountStatusReader().read(db_session, "auth0|abc")

        assert account is not None
        assert account.account_id == row["account_id"]
        assert account.external_subject_id == "auth0|abc"
        assert account.onboarding_completed is True
        assert account.has_qualifying_subscription is True
        assert account.plan_name == "Professional"
        db_session.execute.assert_awaited_once()

    async def test_unknown_subject_returns_none(self, db_session):
        db_session.execute.return_value = mock_result(None)

        assert await AccountStatusReader().read(db_session, "auth0|missing") is None

    async def test_missing_profile_means_onboarding_incomplete(self, db_session):
        """A NULL from the outer join reads as not completed."""
        db_session.execute.return_value = mock_result(
            account_row(onboarding_completed=None, has_qualifying_subscription=False)
        )

        account = await AccountStatusReader().read(db_session, "auth0|abc")

        assert account.onboarding_completed is False
        assert account.has_qualifying_subscription is False

    async def test_no_subscription_rows(self, db_session):
        db_session.execute.return_value = mock_result(
            account_row(
                has_qualifying_subscription=False,
                subscription_id=None,
                subscription_status=None,
                subscription_period_end=None,
                plan_id=None,
                plan_name=None,
            )
        )

        account = await AccountStatusReader().read(db_session, "auth0|abc")

        assert account.has_qualifying_subscription is False
        assert account.subscription_status is None

    async def test_database_error_raises_store_error(self, db_session):
        """Storage failures surface as AccountStoreError, never as a result."""
        db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(AccountStoreError) as exc_info:
            await AccountStatusReader().read(db_session, "auth0|abc")

        assert exc_info.value.status_code == 500
        assert exc_info.value.code == "INFRASTRUCTURE_ERROR"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_connection_error_raises_store_error(self, db_session):
        db_session.execute.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(AccountStoreError):
            await AccountStatusReader().read(db_session, "auth0|abc")

    async def test_reads_wizard_progress(self, db_session):
        db_session.execute.return_value = mock_result(
            account_row(onboarding_completed=False, onboarding_step=5, onboarding_steps_completed=4)
        )

        account = await AccountStatusReader().read(db_session, "auth0|abc")

        assert account.onboarding_step == 5
        assert account.onboarding_steps_completed == 4
        assert account.onboarding_percent == 57

    async def test_missing_progress_row_reads_as_not_started(self, db_session):
        db_session.execute.return_value = mock_result(
            account_row(
                onboarding_completed=None,
                onboarding_step=None,
                onboarding_steps_completed=None,
            )
        )

        account = await AccountStatusReader().read(db_session, "auth0|abc")

        assert account.onboarding_step is None
        assert account.onboarding_steps_completed == 0
        assert account.onboarding_percent == 0
