"""User roles of the library system.

Roles are stored with the user record. Token handling does not branch on
role; it is carried so user records round-trip unchanged.
"""

from enum import Enum


class UserRole(str, Enum):
    """Library user roles.

    String Enum:
        Inherits from str for easy serialization. Values are lowercase to
        match the stored column values.
    """

    USER = "user"
    """Regular library member."""

    ADMIN = "admin"
    """Staff with full management access."""

    MODERATOR = "moderator"
    """Staff who can manage members but not system settings."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['user', 'admin', 'moderator'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
