"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (engine + session factory)
- Logging (structlog console adapter)
- Password hashing (bcrypt)
- Token secret generation
- Email (stub)

Plus the request-scoped database session.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.email_protocol import EmailProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_secret_service_protocol import (
        TokenSecretServiceProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Connections open lazily; the FastAPI lifespan closes the pool on
    shutdown. Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns:
        BcryptPasswordService using settings.bcrypt_rounds.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_secret_service() -> "TokenSecretServiceProtocol":
    """Get token secret service singleton (app-scoped).

    Returns:
        TokenSecretService with lifetimes from settings.
    """
    from src.infrastructure.security import TokenSecretService

    return TokenSecretService(
        password_reset_ttl=timedelta(minutes=settings.password_reset_token_ttl_minutes),
        default_ttl=timedelta(minutes=settings.default_token_ttl_minutes),
    )


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Returns:
        StubEmailService (logs instead of sending) in every environment.
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
