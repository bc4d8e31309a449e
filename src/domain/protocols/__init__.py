"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import TokenRepository, UserRepository
    from src.domain.protocols import PasswordHashingProtocol, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_secret_service_protocol import (
    TokenSecretServiceProtocol,
)

# Repository protocols
from src.domain.protocols.token_repository import TokenRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EmailProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenSecretServiceProtocol",
    # Repository protocols
    "TokenRepository",
    "UserRepository",
]
