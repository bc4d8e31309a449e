"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.token import Token, ttl_for
from src.domain.entities.user import User

__all__ = [
    "Token",
    "User",
    "ttl_for",
]
