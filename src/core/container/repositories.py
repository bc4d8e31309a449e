"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import (
    TokenRepository,
    UserRepository,
)


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        UserRepository instance.
    """
    return UserRepository(session=session)


async def get_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TokenRepository:
    """Get token repository (request-scoped).

    Args:
        session: Database session for request duration.

    Returns:
        TokenRepository instance.
    """
    return TokenRepository(session=session)
