"""TokenSecretServiceProtocol - secret generation and expiry arithmetic.

Infrastructure provides the concrete implementation (TokenSecretService).
Injected into the token engine so tests can force secret collisions.
"""

from datetime import datetime
from typing import Protocol

from src.domain.enums import TokenPurpose


class TokenSecretServiceProtocol(Protocol):
    """Protocol for token secret generation.

    Implementations:
        - TokenSecretService: src/infrastructure/security/token_secret_service.py
    """

    def generate_secret(self) -> str:
        """Generate a token secret.

        Returns:
            64-character lowercase hex string (32 bytes of entropy).
        """
        ...

    def calculate_expiration(
        self, purpose: TokenPurpose, issued_at: datetime
    ) -> datetime:
        """Calculate the expiry of a token issued at issued_at.

        Args:
            purpose: Token purpose (decides the lifetime).
            issued_at: Issue timestamp (UTC).

        Returns:
            Expiration datetime (UTC).
        """
        ...
