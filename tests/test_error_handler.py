"""Tests for the error handlers."""

import json
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from accessgate.core.exceptions import AccountStoreError
from accessgate.middleware import error_handler
from accessgate.middleware.error_handler import (
    app_exception_handler,
    general_exception_handler,
)


def make_request(path: str = "/api/v1/dashboard", method: str = "GET") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": [],
        }
    )


@pytest.mark.asyncio
class TestErrorHandlers:
    """Tests for the shared error envelope."""

    async def test_store_error_envelope(self):
        response = await app_exception_handler(
            make_request(), AccountStoreError("Unable to load plans")
        )

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "success": False,
            "code": "INFRASTRUCTURE_ERROR",
            "message": "Unable to load plans",
            "redirectTo": None,
        }

    async def test_unhandled_exception_is_logged(self, monkeypatch):
        logger = MagicMock()
        monkeypatch.setattr(error_handler, "logger", logger)
        exc = RuntimeError("boom")

        response = await general_exception_handler(make_request(method="POST"), exc)

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["code"] == "INTERNAL_SERVER_ERROR"
        assert "boom" not in body["message"]

        logger.error.assert_called_once()
        kwargs = logger.error.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["path"] == "/api/v1/dashboard"
        assert kwargs["exc_info"] is exc
