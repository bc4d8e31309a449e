"""Pytest configuration and shared fixtures.

This configuration provides:
1. Test markers (unit, integration, api)
2. Automatic asyncio marking for coroutine tests
3. Fresh SQLite databases per test for integration tests
4. Factories for domain entities
"""

import inspect
import secrets
from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.domain.entities.token import Token
from src.domain.entities.user import User
from src.domain.enums import TokenPurpose, UserRole

# Cheapest bcrypt cost, keeps hashing tests fast
TEST_BCRYPT_ROUNDS = 4


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Entity factories
# =============================================================================


def create_token(
    token_id=None,
    owner_id=None,
    purpose: TokenPurpose = TokenPurpose.PASSWORD_RESET,
    secret: str | None = None,
    created_at: datetime | None = None,
    expires_at: datetime | None = None,
    attempts_remaining: int = 3,
    consumed: bool = False,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> Token:
    """Create a Token for testing.

    Defaults to a live password reset token issued now, expiring in 1 hour.
    """
    created_at = created_at or datetime.now(UTC)
    return Token(
        id=token_id or uuid7(),
        owner_id=owner_id or uuid7(),
        purpose=purpose,
        secret=secret or secrets.token_hex(32),
        created_at=created_at,
        expires_at=expires_at or created_at + timedelta(hours=1),
        attempts_remaining=attempts_remaining,
        consumed=consumed,
        ip_address=ip_address,
        user_agent=user_agent,
    )


def create_user(
    user_id=None,
    name: str = "Ada Reader",
    email: str = "reader@example.com",
    password_hash: str = "hashed_password",
    role: UserRole = UserRole.USER,
    is_active: bool = True,
) -> User:
    """Create a User for testing."""
    now = datetime.now(UTC)
    return User(
        id=user_id or uuid7(),
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )


# =============================================================================
# Infrastructure fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a Database backed by a fresh SQLite file with all tables.

    Each test gets its own file, so nothing leaks between tests.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = TokenRepository(session)
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def mock_logger():
    """Provide a mock logger implementing LoggerProtocol.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.critical = Mock()
    return logger
