"""List owner tokens query handler.

Returns every token a user was issued, newest first, without secrets.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from src.application.queries.token_queries import ListOwnerTokens
from src.application.services.token_engine import TokenEngine
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenError


@dataclass
class TokenListItem:
    """Individual token in list result (secret never included)."""

    id: UUID
    purpose: TokenPurpose
    created_at: datetime
    expires_at: datetime
    attempts_remaining: int
    consumed: bool
    is_live: bool
    ip_address: str | None


@dataclass
class TokenListResult:
    """Token list query result."""

    tokens: list[TokenListItem]
    total_count: int
    live_count: int


class ListOwnerTokensHandler:
    """Handler for listing a user's tokens."""

    def __init__(self, token_engine: TokenEngine) -> None:
        """Initialize handler with dependencies.

        Args:
            token_engine: Token lifecycle engine.
        """
        self._token_engine = token_engine

    async def handle(self, query: ListOwnerTokens) -> Result[TokenListResult, TokenError]:
        """Handle list owner tokens query.

        Args:
            query: ListOwnerTokens query with owner_id.

        Returns:
            Success(TokenListResult), or Failure(TokenError) on store failure.
        """
        result = await self._token_engine.list_for_owner(query.owner_id)

        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=tokens):
                pass

        now = datetime.now(UTC)
        items = [
            TokenListItem(
                id=token.id,
                purpose=token.purpose,
                created_at=token.created_at,
                expires_at=token.expires_at,
                attempts_remaining=token.attempts_remaining,
                consumed=token.consumed,
                is_live=token.is_live(now),
                ip_address=token.ip_address,
            )
            for token in tokens
        ]

        return Success(
            value=TokenListResult(
                tokens=items,
                total_count=len(items),
                live_count=sum(1 for item in items if item.is_live),
            )
        )
