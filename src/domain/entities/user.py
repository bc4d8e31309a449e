"""User domain entity.

Pure business logic, no framework dependencies. Only the fields the
password reset flow touches carry behavior; the rest round-trip unchanged.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import UserRole


@dataclass
class User:
    """Library user.

    Attributes:
        id: Unique user identifier.
        name: Display name.
        email: Lowercased email address.
        password_hash: Bcrypt hash (never plaintext).
        role: Library role.
        is_active: Deactivated users cannot request password resets.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.
        age: Optional age.
        phone: Optional phone number.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Ada",
        ...     email="ada@example.com",
        ...     password_hash="$2b$12$...",
        ...     role=UserRole.USER,
        ...     is_active=True,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.can_reset_password()
        True
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime
    age: int | None = None
    phone: str | None = None

    def can_reset_password(self) -> bool:
        """Check if the account may receive password reset tokens.

        Returns:
            bool: True if the account is active.
        """
        return self.is_active
