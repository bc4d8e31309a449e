"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture. The token engine never uses
it; only the password reset handlers look users up and change passwords.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port)."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: User entity to persist.
        """
        ...

    async def update_password(self, user_id: UUID, password_hash: str) -> bool:
        """Replace a user's password hash.

        Args:
            user_id: User's unique identifier.
            password_hash: New bcrypt hash.

        Returns:
            True if a user row was updated, False if the user does not exist.
        """
        ...
