"""Domain enums for business logic.

Available Enums:
    - TokenPurpose: What a token may be redeemed for
    - UserRole: Library user roles (user, admin, moderator)
"""

from src.domain.enums.token_purpose import TokenPurpose
from src.domain.enums.user_role import UserRole

__all__ = [
    "TokenPurpose",
    "UserRole",
]
