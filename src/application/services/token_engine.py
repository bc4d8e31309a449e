"""Token engine.

Owns the lifecycle of single-use, time-limited, attempt-limited tokens:
issue, validate for redemption, record failed attempts, consume, cleanup.
It is a state machine over token records and knows nothing about HTTP,
users or passwords.

State machine:
    Live -> Consumed            consume(), or a later issue() for the same
                                owner and purpose (terminal)
    Live -> Expired             derived, now > expires_at
    Live -> AttemptsExhausted   derived, attempts_remaining == 0

Error surface:
    TOKEN_NOT_FOUND             unknown, consumed, or wrong purpose (one code
                                for all three so token state does not leak)
    TOKEN_EXPIRED
    TOKEN_ATTEMPTS_EXHAUSTED
    TOKEN_OPERATION_FAILED      opaque internal failure; the cause (secret
                                generation exhausted, store unavailable) is
                                logged with reason=... and never returned

Usage:
    engine = TokenEngine(token_repo=repo, secret_service=secrets, logger=logger)

    result = await engine.issue(user.id, TokenPurpose.PASSWORD_RESET)
    match result:
        case Success(value=token):
            send_link(token.secret)
        case Failure(error=error):
            ...
"""

import re
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from src.core.constants import TOKEN_HEX_LENGTH, TOKEN_RETENTION_MAX_DAYS
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.token import Token
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenError, TokenStoreError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.token_repository import TokenRepository
from src.domain.protocols.token_secret_service_protocol import (
    TokenSecretServiceProtocol,
)

DEFAULT_INITIAL_ATTEMPTS = 3
DEFAULT_MAX_GENERATION_ATTEMPTS = 5
DEFAULT_RETENTION = timedelta(days=7)
MAX_RETENTION = timedelta(days=TOKEN_RETENTION_MAX_DAYS)

_SECRET_PATTERN = re.compile(f"[0-9a-f]{{{TOKEN_HEX_LENGTH}}}")

OPERATION_FAILED_MESSAGE = "Token operation failed"


class TokenEngine:
    """Token lifecycle state machine.

    Every mutation is delegated to a single conditional statement in the
    repository, so the engine holds no locks and is safe to run in any
    number of concurrent requests.
    """

    def __init__(
        self,
        token_repo: TokenRepository,
        secret_service: TokenSecretServiceProtocol,
        logger: LoggerProtocol,
        *,
        initial_attempts: int = DEFAULT_INITIAL_ATTEMPTS,
        max_generation_attempts: int = DEFAULT_MAX_GENERATION_ATTEMPTS,
        retention: timedelta = DEFAULT_RETENTION,
    ) -> None:
        """Initialize the engine.

        Args:
            token_repo: Token persistence port.
            secret_service: Secret generation and expiry arithmetic.
            logger: Structured logger.
            initial_attempts: Redemption attempts a new token starts with.
            max_generation_attempts: Secrets tried per issue before giving up
                on collisions.
            retention: Default age after which consumed tokens are deleted.
        """
        self._token_repo = token_repo
        self._secret_service = secret_service
        self._logger = logger
        self._initial_attempts = initial_attempts
        self._max_generation_attempts = max_generation_attempts
        self._retention = retention

    async def issue(
        self,
        owner_id: UUID,
        purpose: TokenPurpose,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Result[Token, TokenError]:
        """Issue a new token, invalidating the owner's live tokens for purpose.

        Steps:
            1. Mark every unconsumed (owner_id, purpose) token consumed.
            2. Build the full token (id, secret, timestamps, attempts).
            3. Insert. On a secret collision generate a new secret and retry.
               If a concurrent issue inserted a live token in between, go
               back to step 1 so the newest insert is the only live one.
               At most max_generation_attempts inserts in total.

        Args:
            owner_id: User the token is issued to.
            purpose: Token purpose.
            ip_address: Requester IP (diagnostics).
            user_agent: Requester user agent (diagnostics).

        Returns:
            Success(Token): The stored token (secret included).
            Failure(TokenError): TOKEN_OPERATION_FAILED.
        """
        needs_invalidation = True
        for attempt in range(1, self._max_generation_attempts + 1):
            if needs_invalidation:
                invalidated = await self._token_repo.invalidate_for_owner(
                    owner_id, purpose
                )
                match invalidated:
                    case Failure(error=store_error):
                        return self._store_failure(
                            "issue",
                            store_error,
                            owner_id=str(owner_id),
                            purpose=purpose.value,
                        )
                    case Success(value=count) if count > 0:
                        self._logger.info(
                            "Prior tokens invalidated",
                            owner_id=str(owner_id),
                            purpose=purpose.value,
                            invalidated_count=count,
                        )
                needs_invalidation = False

            token = self._build_token(owner_id, purpose, ip_address, user_agent)
            saved = await self._token_repo.save(token)

            match saved:
                case Success():
                    self._logger.info(
                        "Token issued",
                        token_id=str(token.id),
                        owner_id=str(owner_id),
                        purpose=purpose.value,
                        secret_preview=token.secret_preview,
                        expires_at=token.expires_at.isoformat(),
                    )
                    return Success(value=token)
                case Failure(error=store_error) if (
                    store_error.code == ErrorCode.TOKEN_SECRET_COLLISION
                ):
                    self._logger.warning(
                        "Token secret collision, regenerating",
                        owner_id=str(owner_id),
                        purpose=purpose.value,
                        attempt=attempt,
                    )
                case Failure(error=store_error) if (
                    store_error.code == ErrorCode.TOKEN_LIVE_CONFLICT
                ):
                    self._logger.warning(
                        "Concurrent token issue detected, retrying",
                        owner_id=str(owner_id),
                        purpose=purpose.value,
                        attempt=attempt,
                    )
                    needs_invalidation = True
                case Failure(error=store_error):
                    return self._store_failure(
                        "issue",
                        store_error,
                        owner_id=str(owner_id),
                        purpose=purpose.value,
                    )

        self._logger.error(
            "Token issue failed",
            reason="generation_exhausted",
            owner_id=str(owner_id),
            purpose=purpose.value,
            attempts=self._max_generation_attempts,
        )
        return Failure(error=self._operation_failed())

    async def validate_for_redemption(
        self,
        secret: str,
        *,
        purpose: TokenPurpose | None = None,
    ) -> Result[Token, TokenError]:
        """Check whether a secret may be redeemed right now.

        Read-only: the attempt counter is not touched. Checks run in a fixed
        order so an expired token always reports TOKEN_EXPIRED even if it
        still has attempts left.

        Args:
            secret: Secret presented by the caller.
            purpose: Only accept tokens of this purpose when given.

        Returns:
            Success(Token): Redeemable token, unchanged.
            Failure(TokenError): TOKEN_NOT_FOUND, TOKEN_EXPIRED,
                TOKEN_ATTEMPTS_EXHAUSTED or TOKEN_OPERATION_FAILED.
        """
        if not _SECRET_PATTERN.fullmatch(secret):
            return Failure(error=self._not_found())

        found = await self._token_repo.find_unconsumed_by_secret(secret, purpose)
        match found:
            case Failure(error=store_error):
                return self._store_failure("validate_for_redemption", store_error)
            case Success(value=None):
                return Failure(error=self._not_found())
            case Success(value=token):
                pass

        if token.is_expired(self._now()):
            self._logger.info(
                "Token redemption rejected", reason="expired", token_id=str(token.id)
            )
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )

        if token.is_exhausted():
            self._logger.info(
                "Token redemption rejected",
                reason="attempts_exhausted",
                token_id=str(token.id),
            )
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_ATTEMPTS_EXHAUSTED,
                    message="Maximum token attempts exceeded",
                )
            )

        return Success(value=token)

    async def record_failed_attempt(self, token_id: UUID) -> Result[None, TokenError]:
        """Burn one redemption attempt.

        The decrement is floored at zero; an unknown id or an already
        exhausted token is a successful no-op.

        Args:
            token_id: Token to charge.

        Returns:
            Success(None), or Failure(TokenError) TOKEN_OPERATION_FAILED.
        """
        decremented = await self._token_repo.decrement_attempts(token_id)
        match decremented:
            case Failure(error=store_error):
                return self._store_failure(
                    "record_failed_attempt", store_error, token_id=str(token_id)
                )
            case Success(value=applied):
                self._logger.info(
                    "Token attempt recorded", token_id=str(token_id), applied=applied
                )
                return Success(value=None)

    async def consume(self, token_id: UUID) -> Result[bool, TokenError]:
        """Mark a token consumed.

        Idempotent: consuming an already consumed or deleted token succeeds
        with False. Of several concurrent calls for one token exactly one
        gets True; callers that act on a redemption gate on it.

        Args:
            token_id: Token to consume.

        Returns:
            Success(bool): True if this call consumed the token.
            Failure(TokenError): TOKEN_OPERATION_FAILED.
        """
        consumed = await self._token_repo.mark_consumed(token_id)
        match consumed:
            case Failure(error=store_error):
                return self._store_failure(
                    "consume", store_error, token_id=str(token_id)
                )
            case Success(value=applied):
                self._logger.info(
                    "Token consumed", token_id=str(token_id), applied=applied
                )
                return Success(value=applied)

    async def cleanup(
        self, retention: timedelta | None = None
    ) -> Result[int, TokenError]:
        """Delete tokens that can never be redeemed again.

        Removes every expired token and every consumed token created more
        than retention ago. Live tokens are never touched.

        Args:
            retention: How long consumed tokens are kept (default from
                the constructor, 7 days). Must lie between zero and
                TOKEN_RETENTION_MAX_DAYS.

        Returns:
            Success(int): Number of tokens deleted.
            Failure(TokenError): VALIDATION_FAILED for a retention out of
                range, TOKEN_OPERATION_FAILED for a store failure.
        """
        now = self._now()
        keep_for = self._retention if retention is None else retention

        if not timedelta(0) <= keep_for <= MAX_RETENTION:
            self._logger.warning(
                "Token cleanup rejected",
                reason="retention_out_of_range",
                retention_days=keep_for.days,
            )
            return Failure(
                error=TokenError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=(
                        "Retention must be between 0 and "
                        f"{TOKEN_RETENTION_MAX_DAYS} days"
                    ),
                    details={"retention_days": str(keep_for.days)},
                )
            )

        deleted = await self._token_repo.delete_unusable(
            now=now, consumed_before=now - keep_for
        )
        match deleted:
            case Failure(error=store_error):
                return self._store_failure("cleanup", store_error)
            case Success(value=count):
                self._logger.info(
                    "Token cleanup completed",
                    deleted_count=count,
                    retention_days=keep_for.days,
                )
                return Success(value=count)

    async def list_for_owner(self, owner_id: UUID) -> Result[list[Token], TokenError]:
        """List every stored token of an owner, newest first."""
        found = await self._token_repo.find_by_owner(owner_id)
        match found:
            case Failure(error=store_error):
                return self._store_failure(
                    "list_for_owner", store_error, owner_id=str(owner_id)
                )
            case Success(value=tokens):
                return Success(value=tokens)

    def _build_token(
        self,
        owner_id: UUID,
        purpose: TokenPurpose,
        ip_address: str | None,
        user_agent: str | None,
    ) -> Token:
        created_at = self._now()
        return Token(
            id=uuid7(),
            owner_id=owner_id,
            purpose=purpose,
            secret=self._secret_service.generate_secret(),
            created_at=created_at,
            expires_at=self._secret_service.calculate_expiration(purpose, created_at),
            attempts_remaining=self._initial_attempts,
            consumed=False,
            ip_address=ip_address,
            user_agent=user_agent,
        )

    def _store_failure(
        self, operation: str, store_error: TokenStoreError, **context: str
    ) -> Failure[TokenError]:
        self._logger.error(
            "Token store failure",
            reason="store_unavailable",
            operation=operation,
            store_error_code=store_error.code.value,
            store_error=store_error.message,
            **context,
        )
        return Failure(error=self._operation_failed())

    @staticmethod
    def _operation_failed() -> TokenError:
        return TokenError(
            code=ErrorCode.TOKEN_OPERATION_FAILED,
            message=OPERATION_FAILED_MESSAGE,
        )

    @staticmethod
    def _not_found() -> TokenError:
        return TokenError(
            code=ErrorCode.TOKEN_NOT_FOUND,
            message="Invalid token",
        )

    @staticmethod
    def _now() -> datetime:
        return datetime.now(UTC)
