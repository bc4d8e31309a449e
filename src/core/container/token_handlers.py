"""Token handler dependency factories.

Request-scoped TokenEngine and the handlers built on it:
- Password reset (request and confirm)
- Owner token listing
- Token cleanup
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends

from src.application.services.token_engine import TokenEngine
from src.core.config import settings
from src.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_password_service,
    get_token_secret_service,
)
from src.core.container.repositories import (
    get_token_repository,
    get_user_repository,
)
from src.infrastructure.persistence.repositories import (
    TokenRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.cleanup_tokens_handler import (
        CleanupTokensHandler,
    )
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.queries.handlers.list_owner_tokens_handler import (
        ListOwnerTokensHandler,
    )


async def get_token_engine(
    token_repo: TokenRepository = Depends(get_token_repository),
) -> TokenEngine:
    """Get token engine (request-scoped).

    Args:
        token_repo: Token repository on the request session.

    Returns:
        TokenEngine configured from settings.
    """
    return TokenEngine(
        token_repo=token_repo,
        secret_service=get_token_secret_service(),
        logger=get_logger(),
        initial_attempts=settings.token_initial_attempts,
        max_generation_attempts=settings.token_max_generation_attempts,
        retention=timedelta(days=settings.token_retention_days),
    )


async def get_request_password_reset_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_engine: TokenEngine = Depends(get_token_engine),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped).

    Returns:
        RequestPasswordResetHandler instance.
    """
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        user_repo=user_repo,
        token_engine=token_engine,
        email_service=get_email_service(),
        logger=get_logger(),
        reset_url_base=settings.reset_url_base,
    )


async def get_confirm_password_reset_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    token_engine: TokenEngine = Depends(get_token_engine),
) -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordReset command handler (request-scoped).

    Returns:
        ConfirmPasswordResetHandler instance.
    """
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )

    return ConfirmPasswordResetHandler(
        user_repo=user_repo,
        token_engine=token_engine,
        password_service=get_password_service(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_list_owner_tokens_handler(
    token_engine: TokenEngine = Depends(get_token_engine),
) -> "ListOwnerTokensHandler":
    """Get ListOwnerTokens query handler (request-scoped).

    Returns:
        ListOwnerTokensHandler instance.
    """
    from src.application.queries.handlers.list_owner_tokens_handler import (
        ListOwnerTokensHandler,
    )

    return ListOwnerTokensHandler(token_engine=token_engine)


async def get_cleanup_tokens_handler(
    token_engine: TokenEngine = Depends(get_token_engine),
) -> "CleanupTokensHandler":
    """Get CleanupTokens command handler (request-scoped).

    Returns:
        CleanupTokensHandler instance.
    """
    from src.application.commands.handlers.cleanup_tokens_handler import (
        CleanupTokensHandler,
    )

    return CleanupTokensHandler(token_engine=token_engine)
