"""Container module - Centralized dependency injection.

    from src.core.container import get_logger, get_token_engine, ...

Organized into modules:
- infrastructure: Database, logging, hashing, secrets, email
- repositories: Repository factories
- token_handlers: TokenEngine and token handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_secret_service,
)

# Repositories
from src.core.container.repositories import (
    get_token_repository,
    get_user_repository,
)

# Token handlers
from src.core.container.token_handlers import (
    get_cleanup_tokens_handler,
    get_confirm_password_reset_handler,
    get_list_owner_tokens_handler,
    get_request_password_reset_handler,
    get_token_engine,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_token_secret_service",
    # Repositories
    "get_token_repository",
    "get_user_repository",
    # Token handlers
    "get_cleanup_tokens_handler",
    "get_confirm_password_reset_handler",
    "get_list_owner_tokens_handler",
    "get_request_password_reset_handler",
    "get_token_engine",
]
