"""API tests for token listing and cleanup endpoints.

Tests:
- GET /api/v1/users/{user_id}/tokens
- POST /api/v1/token-cleanups
"""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.commands.handlers.cleanup_tokens_handler import (
    CleanupTokensResult,
)
from src.application.queries.handlers.list_owner_tokens_handler import (
    TokenListItem,
    TokenListResult,
)
from src.core.constants import TOKEN_RETENTION_MAX_DAYS
from src.core.container import (
    get_cleanup_tokens_handler,
    get_list_owner_tokens_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenError
from src.main import app


class StubHandler:
    """Stub handler returning a fixed Result and recording calls."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    async def handle(self, message):
        self.calls.append(message)
        return self.result


@pytest.fixture(autouse=True)
def override_dependencies():
    """Clear dependency overrides after each test."""
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


def _item(*, consumed: bool = False, is_live: bool = True) -> TokenListItem:
    now = datetime.now(UTC)
    return TokenListItem(
        id=uuid7(),
        purpose=TokenPurpose.PASSWORD_RESET,
        created_at=now,
        expires_at=now + timedelta(hours=1),
        attempts_remaining=3,
        consumed=consumed,
        is_live=is_live,
        ip_address="203.0.113.7",
    )


@pytest.mark.api
class TestListUserTokens:
    """Tests for GET /api/v1/users/{user_id}/tokens."""

    def test_returns_summaries_without_secrets(self, client):
        user_id = uuid7()
        stub = StubHandler(
            Success(
                value=TokenListResult(
                    tokens=[_item(), _item(consumed=True, is_live=False)],
                    total_count=2,
                    live_count=1,
                )
            )
        )
        app.dependency_overrides[get_list_owner_tokens_handler] = lambda: stub

        response = client.get(f"/api/v1/users/{user_id}/tokens")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 2
        assert data["live_count"] == 1
        assert data["tokens"][0]["purpose"] == "password_reset"
        assert data["tokens"][1]["consumed"] is True
        assert all("secret" not in token for token in data["tokens"])
        assert stub.calls[0].owner_id == user_id

    def test_empty_list(self, client):
        stub = StubHandler(
            Success(value=TokenListResult(tokens=[], total_count=0, live_count=0))
        )
        app.dependency_overrides[get_list_owner_tokens_handler] = lambda: stub

        response = client.get(f"/api/v1/users/{uuid7()}/tokens")

        assert response.status_code == 200
        assert response.json() == {"tokens": [], "total_count": 0, "live_count": 0}

    def test_invalid_user_id_returns_422(self, client):
        stub = StubHandler(None)
        app.dependency_overrides[get_list_owner_tokens_handler] = lambda: stub

        response = client.get("/api/v1/users/not-a-uuid/tokens")

        assert response.status_code == 422
        assert stub.calls == []

    def test_store_failure_returns_500(self, client):
        stub = StubHandler(
            Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_OPERATION_FAILED,
                    message="Token store unavailable",
                )
            )
        )
        app.dependency_overrides[get_list_owner_tokens_handler] = lambda: stub

        response = client.get(f"/api/v1/users/{uuid7()}/tokens")

        assert response.status_code == 500
        assert response.json()["title"] == "Internal Server Error"


@pytest.mark.api
class TestCreateTokenCleanup:
    """Tests for POST /api/v1/token-cleanups."""

    def test_without_body_uses_configured_retention(self, client):
        stub = StubHandler(Success(value=CleanupTokensResult(deleted_count=4)))
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post("/api/v1/token-cleanups")

        assert response.status_code == 201
        assert response.json() == {"deleted_count": 4}
        assert stub.calls[0].retention_days is None

    def test_with_retention_override(self, client):
        stub = StubHandler(Success(value=CleanupTokensResult(deleted_count=0)))
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post("/api/v1/token-cleanups", json={"retention_days": 0})

        assert response.status_code == 201
        assert stub.calls[0].retention_days == 0

    def test_negative_retention_returns_422(self, client):
        stub = StubHandler(Success(value=CleanupTokensResult(deleted_count=0)))
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post("/api/v1/token-cleanups", json={"retention_days": -1})

        assert response.status_code == 422
        assert stub.calls == []

    def test_maximum_retention_is_accepted(self, client):
        stub = StubHandler(Success(value=CleanupTokensResult(deleted_count=1)))
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post(
            "/api/v1/token-cleanups",
            json={"retention_days": TOKEN_RETENTION_MAX_DAYS},
        )

        assert response.status_code == 201
        assert stub.calls[0].retention_days == TOKEN_RETENTION_MAX_DAYS

    @pytest.mark.parametrize(
        "retention_days", [TOKEN_RETENTION_MAX_DAYS + 1, 1_000_000]
    )
    def test_retention_above_maximum_returns_422(self, client, retention_days):
        stub = StubHandler(Success(value=CleanupTokensResult(deleted_count=0)))
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post(
            "/api/v1/token-cleanups", json={"retention_days": retention_days}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "retention_days"
        assert stub.calls == []

    def test_engine_retention_rejection_returns_400(self, client):
        stub = StubHandler(
            Failure(
                error=TokenError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Retention must be between 0 and 3650 days",
                )
            )
        )
        app.dependency_overrides[get_cleanup_tokens_handler] = lambda: stub

        response = client.post("/api/v1/token-cleanups", json={"retention_days": 7})

        assert response.status_code == 400
        body = response.json()
        assert body["type"].endswith("/errors/validation_failed")
        assert body["detail"] == "Retention must be between 0 and 3650 days"
