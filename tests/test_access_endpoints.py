"""Tests for access status endpoints."""

import pytest
from conftest import auth_headers_for


@pytest.mark.asyncio
class TestAccessStatusEndpoint:
    """Tests for /access/status."""

    async def test_full_access_client(self, client, client_account):
        response = await client.get(
            "/api/v1/access/status", headers=auth_headers_for(client_account.external_subject_id)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        assert data["hasAccess"] is True
        assert data["onboardingComplete"] is True
        assert data["hasSubscription"] is True
        assert data["subscriptionStatus"] == "active"
        assert data["planName"] == "Professional"
        assert data["redirectTo"] is None

    async def test_client_missing_onboarding(self, client, reader, make_account):
        account = reader.add(make_account(has_qualifying_subscription=True))

        response = await client.get(
            "/api/v1/access/status", headers=auth_headers_for(account.external_subject_id)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["hasAccess"] is False
        assert data["code"] == "ONBOARDING_INCOMPLETE"
        assert data["redirectTo"] == "/onboarding"

    async def test_never_denies_unauthenticated_caller(self, client):
        response = await client.get("/api/v1/access/status")

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is False
        assert data["code"] == "UNAUTHENTICATED"

    async def test_unknown_subject_is_reported(self, client):
        response = await client.get(
            "/api/v1/access/status", headers=auth_headers_for("auth0|unknown")
        )

        assert response.status_code == 200
        assert response.json()["found"] is False
        assert response.json()["code"] == "NOT_FOUND"

    async def test_store_failure_is_an_error(self, client, store_failure):
        response = await client.get(
            "/api/v1/access/status", headers=auth_headers_for("auth0|anyone")
        )

        assert response.status_code == 500
        assert response.json()["code"] == "INFRASTRUCTURE_ERROR"

    async def test_legacy_path(self, client, staff_account):
        response = await client.get(
            "/api/v1/subscriptions/access-status",
            headers=auth_headers_for(staff_account.external_subject_id),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isPrivileged"] is True
        assert data["hasAccess"] is True


@pytest.mark.asyncio
class TestAdminAccessStatus:
    """Tests for /admin/access-status/{subject_id}."""

    async def test_staff_can_inspect_client(self, client, staff_account, reader, make_account):
        target = reader.add(make_account(onboarding_completed=True))

        response = await client.get(
            f"/api/v1/admin/access-status/{target.external_subject_id}",
            headers=auth_headers_for(staff_account.external_subject_id),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        assert data["hasAccess"] is False
        assert data["code"] == "NO_ACTIVE_SUBSCRIPTION"

    async def test_client_cannot_inspect(self, client, client_account):
        response = await client.get(
            "/api/v1/admin/access-status/auth0|someone",
            headers=auth_headers_for(client_account.external_subject_id),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    async def test_requires_authentication(self, client):
        response = await client.get("/api/v1/admin/access-status/auth0|someone")

        assert response.status_code == 401
