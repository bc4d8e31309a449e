"""Integration tests for TokenRepository.

Tests cover:
- Save and find by secret (with and without purpose filter)
- Secret uniqueness (collision reported, not raised)
- One live token per owner and purpose (conflict reported, not raised)
- Conditional writes: invalidate, mark consumed, decrement attempts
- Cleanup deletes only unusable tokens
- Listing by owner, newest first
- Store failures returned as TOKEN_STORE_UNAVAILABLE

Architecture:
- Integration tests with a REAL SQLite database (fresh file per test)
- Timestamps read back are UTC-aware
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenPurpose
from src.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)
from tests.conftest import create_token


@pytest_asyncio.fixture
async def token_repository(test_database):
    """Provide TokenRepository with a test database session."""
    async with test_database.get_session() as session:
        yield TokenRepository(session=session)


@pytest.mark.integration
class TestTokenRepositorySaveAndFind:
    """Test save and lookup."""

    async def test_save_then_find_by_secret(self, token_repository):
        token = create_token(ip_address="10.0.0.1", user_agent="pytest")

        saved = await token_repository.save(token)
        found = await token_repository.find_unconsumed_by_secret(token.secret)

        assert saved == Success(value=None)
        assert isinstance(found, Success)
        assert found.value.id == token.id
        assert found.value.owner_id == token.owner_id
        assert found.value.purpose == TokenPurpose.PASSWORD_RESET
        assert found.value.attempts_remaining == 3
        assert found.value.ip_address == "10.0.0.1"
        assert found.value.user_agent == "pytest"

    async def test_timestamps_round_trip_as_utc(self, token_repository):
        created_at = datetime(2024, 6, 1, 12, 0, 0, 123456, tzinfo=UTC)
        token = create_token(
            created_at=created_at, expires_at=created_at + timedelta(hours=1)
        )
        await token_repository.save(token)

        found = await token_repository.find_unconsumed_by_secret(token.secret)

        assert found.value.created_at == created_at
        assert found.value.expires_at == created_at + timedelta(hours=1)
        assert found.value.expires_at.tzinfo is not None

    async def test_unknown_secret_returns_none(self, token_repository):
        found = await token_repository.find_unconsumed_by_secret("f" * 64)

        assert found == Success(value=None)

    async def test_purpose_filter(self, token_repository):
        token = create_token(purpose=TokenPurpose.EMAIL_VERIFICATION)
        await token_repository.save(token)

        wrong = await token_repository.find_unconsumed_by_secret(
            token.secret, TokenPurpose.PASSWORD_RESET
        )
        right = await token_repository.find_unconsumed_by_secret(
            token.secret, TokenPurpose.EMAIL_VERIFICATION
        )

        assert wrong == Success(value=None)
        assert right.value.id == token.id

    async def test_consumed_token_is_not_found(self, token_repository):
        token = create_token(consumed=True)
        await token_repository.save(token)

        found = await token_repository.find_unconsumed_by_secret(token.secret)

        assert found == Success(value=None)

    async def test_duplicate_secret_reports_collision(self, token_repository):
        first = create_token()
        await token_repository.save(first)

        result = await token_repository.save(create_token(secret=first.secret))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_SECRET_COLLISION

    async def test_session_usable_after_collision(self, token_repository):
        first = create_token()
        await token_repository.save(first)
        await token_repository.save(create_token(secret=first.secret))

        other = create_token()
        result = await token_repository.save(other)

        assert result == Success(value=None)
        found = await token_repository.find_unconsumed_by_secret(other.secret)
        assert found.value.id == other.id

    async def test_second_live_token_for_owner_reports_live_conflict(
        self, token_repository
    ):
        owner_id = uuid7()
        await token_repository.save(create_token(owner_id=owner_id))

        result = await token_repository.save(create_token(owner_id=owner_id))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_LIVE_CONFLICT
        assert result.error.details["purpose"] == TokenPurpose.PASSWORD_RESET.value

    async def test_live_conflict_ignores_consumed_and_other_purposes(
        self, token_repository
    ):
        owner_id = uuid7()
        tokens = [
            create_token(owner_id=owner_id, consumed=True),
            create_token(owner_id=owner_id, consumed=True),
            create_token(owner_id=owner_id, purpose=TokenPurpose.EMAIL_VERIFICATION),
            create_token(owner_id=owner_id),
        ]

        results = [await token_repository.save(token) for token in tokens]

        assert results == [Success(value=None)] * 4

    async def test_save_after_invalidate_is_accepted(self, token_repository):
        owner_id = uuid7()
        await token_repository.save(create_token(owner_id=owner_id))
        await token_repository.invalidate_for_owner(owner_id, TokenPurpose.PASSWORD_RESET)

        result = await token_repository.save(create_token(owner_id=owner_id))

        assert result == Success(value=None)


@pytest.mark.integration
class TestTokenRepositoryConditionalWrites:
    """Test compare-and-set updates."""

    async def test_invalidate_for_owner_only_touches_owner_and_purpose(
        self, token_repository
    ):
        owner_id = uuid7()
        already_used = create_token(owner_id=owner_id, consumed=True)
        reset = create_token(owner_id=owner_id)
        verification = create_token(
            owner_id=owner_id, purpose=TokenPurpose.EMAIL_VERIFICATION
        )
        other_owner = create_token()
        for token in (already_used, reset, verification, other_owner):
            await token_repository.save(token)

        result = await token_repository.invalidate_for_owner(
            owner_id, TokenPurpose.PASSWORD_RESET
        )

        assert result == Success(value=1)
        found = await token_repository.find_unconsumed_by_secret(reset.secret)
        assert found.value is None
        for token in (verification, other_owner):
            found = await token_repository.find_unconsumed_by_secret(token.secret)
            assert found.value is not None

    async def test_invalidate_with_nothing_live_returns_zero(self, token_repository):
        result = await token_repository.invalidate_for_owner(
            uuid7(), TokenPurpose.PASSWORD_RESET
        )

        assert result == Success(value=0)

    async def test_mark_consumed_flips_once(self, token_repository):
        token = create_token()
        await token_repository.save(token)

        first = await token_repository.mark_consumed(token.id)
        second = await token_repository.mark_consumed(token.id)

        assert first == Success(value=True)
        assert second == Success(value=False)
        found = await token_repository.find_unconsumed_by_secret(token.secret)
        assert found.value is None

    async def test_mark_consumed_unknown_id_is_false(self, token_repository):
        assert await token_repository.mark_consumed(uuid7()) == Success(value=False)

    async def test_decrement_attempts_floors_at_zero(self, token_repository):
        token = create_token(attempts_remaining=2)
        await token_repository.save(token)

        results = [await token_repository.decrement_attempts(token.id) for _ in range(4)]

        assert results == [
            Success(value=True),
            Success(value=True),
            Success(value=False),
            Success(value=False),
        ]
        found = await token_repository.find_unconsumed_by_secret(token.secret)
        assert found.value.attempts_remaining == 0


@pytest.mark.integration
class TestTokenRepositoryCleanupAndList:
    """Test deletion of unusable tokens and owner listing."""

    async def test_delete_unusable_keeps_live_and_recent_consumed(
        self, token_repository
    ):
        now = datetime.now(UTC)
        live = create_token(created_at=now)
        expired = create_token(
            created_at=now - timedelta(hours=2), expires_at=now - timedelta(hours=1)
        )
        old_consumed = create_token(
            created_at=now - timedelta(days=8),
            expires_at=now + timedelta(hours=1),
            consumed=True,
        )
        recent_consumed = create_token(
            created_at=now - timedelta(days=1),
            expires_at=now + timedelta(hours=1),
            consumed=True,
        )
        for token in (live, expired, old_consumed, recent_consumed):
            await token_repository.save(token)

        result = await token_repository.delete_unusable(
            now=now, consumed_before=now - timedelta(days=7)
        )

        assert result == Success(value=2)
        remaining = {
            token.id
            for owner in (live, recent_consumed)
            for token in (await token_repository.find_by_owner(owner.owner_id)).value
        }
        assert remaining == {live.id, recent_consumed.id}
        assert (await token_repository.find_by_owner(expired.owner_id)).value == []
        assert (await token_repository.find_by_owner(old_consumed.owner_id)).value == []

    async def test_find_by_owner_newest_first(self, token_repository):
        owner_id = uuid7()
        now = datetime.now(UTC)
        older = create_token(
            owner_id=owner_id, created_at=now - timedelta(minutes=5), consumed=True
        )
        newer = create_token(owner_id=owner_id, created_at=now)
        await token_repository.save(older)
        await token_repository.save(newer)

        result = await token_repository.find_by_owner(owner_id)

        assert [token.id for token in result.value] == [newer.id, older.id]


@pytest.mark.integration
class TestTokenRepositoryStoreFailure:
    """Store errors come back as Failure, never as exceptions."""

    async def test_find_on_missing_table_is_store_unavailable(self, test_database):
        await test_database.drop_all()

        async with test_database.get_session() as session:
            repo = TokenRepository(session=session)
            result = await repo.find_unconsumed_by_secret("a" * 64)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_STORE_UNAVAILABLE

    async def test_write_on_missing_table_is_store_unavailable(self, test_database):
        await test_database.drop_all()

        async with test_database.get_session() as session:
            repo = TokenRepository(session=session)
            result = await repo.mark_consumed(uuid7())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_STORE_UNAVAILABLE
