"""Cleanup Tokens handler.

Deletes every expired token and every consumed token older than the
retention window. Live tokens are never deleted.
"""

from dataclasses import dataclass
from datetime import timedelta

from src.application.commands.token_commands import CleanupTokens
from src.application.services.token_engine import TokenEngine
from src.core.constants import TOKEN_RETENTION_MAX_DAYS
from src.core.result import Failure, Result, Success
from src.domain.errors import TokenError


@dataclass
class CleanupTokensResult:
    """Cleanup command result."""

    deleted_count: int


class CleanupTokensHandler:
    """Handler for cleanup tokens command."""

    def __init__(self, token_engine: TokenEngine) -> None:
        """Initialize handler with dependencies.

        Args:
            token_engine: Token lifecycle engine.
        """
        self._token_engine = token_engine

    async def handle(self, cmd: CleanupTokens) -> Result[CleanupTokensResult, TokenError]:
        """Handle cleanup tokens command.

        Args:
            cmd: CleanupTokens command with optional retention override.

        Returns:
            Success(CleanupTokensResult) with the number of deleted tokens.
            Failure(TokenError) VALIDATION_FAILED for a retention outside
            0..TOKEN_RETENTION_MAX_DAYS, TOKEN_OPERATION_FAILED on store
            failure.
        """
        retention = None
        if cmd.retention_days is not None:
            # Clamped to one day outside 0..max so timedelta cannot overflow;
            # the engine rejects anything out of range
            days = max(-1, min(cmd.retention_days, TOKEN_RETENTION_MAX_DAYS + 1))
            retention = timedelta(days=days)
        result = await self._token_engine.cleanup(retention)

        match result:
            case Success(value=count):
                return Success(value=CleanupTokensResult(deleted_count=count))
            case Failure(error=error):
                return Failure(error=error)
