"""TokenRepository protocol (port) for token persistence.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored

Concurrency contract:
    Every mutation is a single conditional statement evaluated by the
    store (compare-and-set). Implementations MUST NOT read-modify-write
    in application memory:

    - invalidate_for_owner:  UPDATE ... SET consumed = true WHERE consumed = false
    - mark_consumed:         UPDATE ... SET consumed = true WHERE consumed = false
    - decrement_attempts:    UPDATE ... SET attempts_remaining = attempts_remaining - 1
                             WHERE attempts_remaining > 0

Failure contract:
    Methods never raise for store problems. They return
    Failure(TokenStoreError) with TOKEN_SECRET_COLLISION when an insert
    hits the unique secret constraint, TOKEN_LIVE_CONFLICT when it would
    leave two unconsumed tokens for one (owner, purpose), and
    TOKEN_STORE_UNAVAILABLE for any other store failure.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.token import Token
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenStoreError


class TokenRepository(Protocol):
    """Protocol for token persistence operations.

    Implementations:
        - TokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def save(self, token: Token) -> Result[None, TokenStoreError]:
        """Insert a fully built token.

        Args:
            token: Token with every field already computed.

        Returns:
            Success(None) if inserted.
            Failure(TokenStoreError) with TOKEN_SECRET_COLLISION if the
            secret already exists, TOKEN_LIVE_CONFLICT if the owner still
            holds an unconsumed token for the purpose, and
            TOKEN_STORE_UNAVAILABLE otherwise.
        """
        ...

    async def find_unconsumed_by_secret(
        self,
        secret: str,
        purpose: TokenPurpose | None = None,
    ) -> Result[Token | None, TokenStoreError]:
        """Find an unconsumed token by its secret.

        Does NOT check expiry or attempts; the caller decides.

        Args:
            secret: 64-char hex secret.
            purpose: Restrict the match to this purpose when given.

        Returns:
            Success(Token) if found, Success(None) otherwise.
        """
        ...

    async def find_by_owner(
        self, owner_id: UUID
    ) -> Result[list[Token], TokenStoreError]:
        """Find every token of an owner, newest first.

        Args:
            owner_id: Owner's unique identifier.

        Returns:
            Success(list[Token]) (may be empty).
        """
        ...

    async def invalidate_for_owner(
        self,
        owner_id: UUID,
        purpose: TokenPurpose,
    ) -> Result[int, TokenStoreError]:
        """Mark every unconsumed token for (owner, purpose) as consumed.

        Args:
            owner_id: Owner's unique identifier.
            purpose: Token purpose.

        Returns:
            Success(int): Number of tokens invalidated.
        """
        ...

    async def mark_consumed(self, token_id: UUID) -> Result[bool, TokenStoreError]:
        """Set consumed = true if it is still false.

        Args:
            token_id: Token's unique identifier.

        Returns:
            Success(True) if this call flipped the flag, Success(False) if
            the token was already consumed or does not exist.
        """
        ...

    async def decrement_attempts(
        self, token_id: UUID
    ) -> Result[bool, TokenStoreError]:
        """Decrement attempts_remaining if it is above zero.

        Args:
            token_id: Token's unique identifier.

        Returns:
            Success(True) if decremented, Success(False) if the counter was
            already zero or the token does not exist.
        """
        ...

    async def delete_unusable(
        self,
        now: datetime,
        consumed_before: datetime,
    ) -> Result[int, TokenStoreError]:
        """Hard-delete tokens that can never be redeemed again.

        Deletes tokens where expires_at < now, or consumed tokens created
        before consumed_before.

        Args:
            now: Current time (UTC).
            consumed_before: Retention cutoff for consumed tokens.

        Returns:
            Success(int): Number of tokens deleted.
        """
        ...
