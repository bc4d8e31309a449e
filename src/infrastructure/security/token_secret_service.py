"""Token secret service.

Implements TokenSecretServiceProtocol: secret generation plus per-purpose
expiry arithmetic.

Token Strategy:
    - 32-byte random hex string (64 lowercase characters)
    - Stored in plain text (already unguessable, looked up by equality)
    - Password reset tokens live 1 hour, other purposes 24 hours
"""

import secrets
from datetime import datetime, timedelta

from src.core.constants import TOKEN_BYTES
from src.domain.entities.token import ttl_for
from src.domain.enums import TokenPurpose


class TokenSecretService:
    """Token secret generation service.

    Usage:
        service = TokenSecretService(
            password_reset_ttl=timedelta(minutes=settings.password_reset_token_ttl_minutes),
            default_ttl=timedelta(minutes=settings.default_token_ttl_minutes),
        )
        secret = service.generate_secret()
        expires_at = service.calculate_expiration(TokenPurpose.PASSWORD_RESET, now)
    """

    def __init__(
        self,
        password_reset_ttl: timedelta | None = None,
        default_ttl: timedelta | None = None,
    ) -> None:
        """Initialize token secret service.

        Args:
            password_reset_ttl: Lifetime of password reset tokens
                (default: 1 hour).
            default_ttl: Lifetime of every other purpose (default: 24 hours).
        """
        self._ttls: dict[TokenPurpose, timedelta] = {
            purpose: ttl_for(purpose) for purpose in TokenPurpose
        }
        if password_reset_ttl is not None:
            self._ttls[TokenPurpose.PASSWORD_RESET] = password_reset_ttl
        if default_ttl is not None:
            for purpose in TokenPurpose:
                if purpose != TokenPurpose.PASSWORD_RESET:
                    self._ttls[purpose] = default_ttl

    def generate_secret(self) -> str:
        """Generate a token secret.

        Returns:
            64-character hex string (32 bytes of entropy).

        Example:
            >>> secret = TokenSecretService().generate_secret()
            >>> len(secret)
            64
            >>> all(c in "0123456789abcdef" for c in secret)
            True
        """
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(
        self, purpose: TokenPurpose, issued_at: datetime
    ) -> datetime:
        """Calculate the expiry of a token issued at issued_at.

        Args:
            purpose: Token purpose.
            issued_at: Issue timestamp (UTC).

        Returns:
            issued_at plus the lifetime configured for the purpose.
        """
        return issued_at + self._ttls[purpose]
