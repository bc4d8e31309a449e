"""Token commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Commands are data containers; handlers hold the logic and
return Result types.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset link.

    Always answered with success so callers cannot tell which emails
    have accounts.

    Attributes:
        email: Email address the reset was requested for.
        ip_address: Requester IP (stored on the token for diagnostics).
        user_agent: Requester user agent (stored on the token).

    Example:
        >>> command = RequestPasswordReset(email="reader@example.com")
        >>> result = await handler.handle(command)
    """

    email: str
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Redeem a password reset token and set a new password.

    Attributes:
        token: 64-char hex secret from the reset link.
        new_password: Plaintext new password (checked, then hashed).
    """

    token: str
    new_password: str


@dataclass(frozen=True, kw_only=True)
class CleanupTokens:
    """Delete expired tokens and consumed tokens past retention.

    Attributes:
        retention_days: Days consumed tokens are kept. None uses the
            configured default.
    """

    retention_days: int | None = None
