"""Repository implementations (adapters for hexagonal architecture)."""

from src.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "TokenRepository",
    "UserRepository",
]
