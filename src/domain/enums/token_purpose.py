"""Token purposes.

Every token is issued for exactly one purpose. The purpose decides the
token lifetime and scopes the one-live-token-per-owner rule.

Usage:
    from src.domain.enums import TokenPurpose

    result = await engine.issue(user.id, TokenPurpose.PASSWORD_RESET)
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Closed set of token purposes.

    String enum so values serialize directly into the database column
    and JSON responses.
    """

    PASSWORD_RESET = "password_reset"
    """Single-use link that lets a user choose a new password (1 hour)."""

    EMAIL_VERIFICATION = "email_verification"
    """Proves ownership of an email address (24 hours)."""

    ACCOUNT_ACTIVATION = "account_activation"
    """Activates a newly created account (24 hours)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all purpose values as strings.

        Returns:
            list[str]: Purpose values in declaration order.
        """
        return [purpose.value for purpose in cls]
