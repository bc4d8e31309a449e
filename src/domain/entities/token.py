"""Token domain entity.

A token is a single-use, time-limited, attempt-limited secret bound to an
owner and a purpose. The entity is a plain record plus the derived state
checks the engine needs; every mutation goes through the repository as a
conditional update, never through attribute assignment.

Lifecycle:
    Live -> Consumed            (redemption or invalidation, terminal)
    Live -> Expired             (derived: now > expires_at)
    Live -> AttemptsExhausted   (derived: attempts_remaining == 0)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from src.core.constants import TOKEN_PREVIEW_LENGTH
from src.domain.enums import TokenPurpose

# Default lifetimes by purpose
PASSWORD_RESET_TTL = timedelta(hours=1)
DEFAULT_TTL = timedelta(hours=24)


def ttl_for(purpose: TokenPurpose) -> timedelta:
    """Get the default lifetime for a token purpose.

    Args:
        purpose: Token purpose.

    Returns:
        timedelta: One hour for password resets, 24 hours otherwise.
    """
    if purpose == TokenPurpose.PASSWORD_RESET:
        return PASSWORD_RESET_TTL
    return DEFAULT_TTL


@dataclass(frozen=True, slots=True, kw_only=True)
class Token:
    """Token record.

    Attributes:
        id: Unique identifier (UUIDv7), assigned before persistence.
        owner_id: User the token belongs to.
        purpose: What the token may be redeemed for.
        secret: 64-character lowercase hex secret, globally unique.
        created_at: Issue timestamp (UTC).
        expires_at: Expiry timestamp (UTC), created_at + ttl.
        attempts_remaining: Redemption attempts left, never increases.
        consumed: True once redeemed or invalidated.
        ip_address: Requester IP (diagnostics only).
        user_agent: Requester user agent (diagnostics only).

    Example:
        >>> token.is_live(datetime.now(UTC))
        True
        >>> token.secret_preview
        'a1b2c3d4...'
    """

    id: UUID
    owner_id: UUID
    purpose: TokenPurpose
    secret: str
    created_at: datetime
    expires_at: datetime
    attempts_remaining: int
    consumed: bool = False
    ip_address: str | None = None
    user_agent: str | None = None

    def is_expired(self, now: datetime) -> bool:
        """Check whether the token is past its expiry.

        Args:
            now: Current time (UTC-aware).

        Returns:
            bool: True if now is strictly after expires_at.
        """
        return now > self.expires_at

    def is_exhausted(self) -> bool:
        """Check whether no redemption attempts remain."""
        return self.attempts_remaining <= 0

    def is_live(self, now: datetime) -> bool:
        """Check whether the token could still satisfy a redemption.

        Args:
            now: Current time (UTC-aware).

        Returns:
            bool: True if unconsumed, unexpired and attempts remain.
        """
        return not self.consumed and not self.is_expired(now) and not self.is_exhausted()

    @property
    def secret_preview(self) -> str:
        """Loggable prefix of the secret."""
        return f"{self.secret[:TOKEN_PREVIEW_LENGTH]}..."
