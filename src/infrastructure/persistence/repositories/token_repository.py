"""TokenRepository - SQLAlchemy implementation of the TokenRepository protocol.

Every mutation is one conditional statement (compare-and-set in the
store), so concurrent requests never double-consume a token or push the
attempt counter below zero. Store exceptions are caught here and returned
as Failure(TokenStoreError); nothing above this layer sees SQLAlchemy.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Executable, and_, delete, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.token import Token
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenStoreError
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.token import LIVE_TOKEN_INDEX, TokenModel


def _to_domain(model: TokenModel) -> Token:
    """Convert database model to domain entity."""
    return Token(
        id=model.id,
        owner_id=model.owner_id,
        purpose=TokenPurpose(model.purpose),
        secret=model.secret,
        created_at=as_utc(model.created_at),
        expires_at=as_utc(model.expires_at),
        attempts_remaining=model.attempts_remaining,
        consumed=model.consumed,
        ip_address=model.ip_address,
        user_agent=model.user_agent,
    )


def _to_model(token: Token) -> TokenModel:
    """Convert domain entity to database model."""
    return TokenModel(
        id=token.id,
        owner_id=token.owner_id,
        purpose=token.purpose.value,
        secret=token.secret,
        created_at=token.created_at,
        expires_at=token.expires_at,
        attempts_remaining=token.attempts_remaining,
        consumed=token.consumed,
        ip_address=token.ip_address,
        user_agent=token.user_agent,
    )


def _store_unavailable(operation: str, exc: SQLAlchemyError) -> TokenStoreError:
    return TokenStoreError(
        code=ErrorCode.TOKEN_STORE_UNAVAILABLE,
        message=f"Token store failed during {operation}",
        details={"operation": operation, "error_type": type(exc).__name__},
    )


def _violates_live_index(exc: IntegrityError) -> bool:
    """True when the insert hit the one-live-token-per-owner index.

    PostgreSQL names the index in the message; SQLite names its columns.
    """
    message = str(exc.orig)
    return LIVE_TOKEN_INDEX in message or "tokens.owner_id" in message


class TokenRepository:
    """SQLAlchemy implementation of the TokenRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = TokenRepository(session)
        ...     result = await repo.find_unconsumed_by_secret("ab12...")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, token: Token) -> Result[None, TokenStoreError]:
        """Insert a fully built token.

        Args:
            token: Token with every field already computed.

        Returns:
            Success(None), or Failure(TokenStoreError) with
            TOKEN_LIVE_CONFLICT when the owner already holds a live token
            for the purpose, TOKEN_SECRET_COLLISION on a duplicate secret
            and TOKEN_STORE_UNAVAILABLE for any other store failure.
        """
        try:
            self.session.add(_to_model(token))
            await self.session.commit()
            return Success(value=None)
        except IntegrityError as e:
            await self.session.rollback()
            if _violates_live_index(e):
                return Failure(
                    error=TokenStoreError(
                        code=ErrorCode.TOKEN_LIVE_CONFLICT,
                        message="Owner already holds a live token for this purpose",
                        details={
                            "token_id": str(token.id),
                            "purpose": token.purpose.value,
                        },
                    )
                )
            return Failure(
                error=TokenStoreError(
                    code=ErrorCode.TOKEN_SECRET_COLLISION,
                    message="Token secret already exists",
                    details={"token_id": str(token.id)},
                )
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_store_unavailable("save", e))

    async def find_unconsumed_by_secret(
        self,
        secret: str,
        purpose: TokenPurpose | None = None,
    ) -> Result[Token | None, TokenStoreError]:
        """Find an unconsumed token by its secret.

        Args:
            secret: 64-char hex secret.
            purpose: Restrict the match to this purpose when given.

        Returns:
            Success(Token) if found, Success(None) otherwise.
        """
        stmt = select(TokenModel).where(
            TokenModel.secret == secret,
            TokenModel.consumed.is_(False),
        ).execution_options(populate_existing=True)
        if purpose is not None:
            stmt = stmt.where(TokenModel.purpose == purpose.value)

        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_store_unavailable("find_unconsumed_by_secret", e))

        return Success(value=_to_domain(model) if model else None)

    async def find_by_owner(
        self, owner_id: UUID
    ) -> Result[list[Token], TokenStoreError]:
        """Find every token of an owner, newest first.

        Args:
            owner_id: Owner's unique identifier.

        Returns:
            Success(list[Token]) (may be empty).
        """
        stmt = (
            select(TokenModel)
            .where(TokenModel.owner_id == owner_id)
            .order_by(TokenModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_store_unavailable("find_by_owner", e))

        return Success(value=[_to_domain(model) for model in models])

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
        stmt = (
            update(TokenModel)
            .where(
                TokenModel.owner_id == owner_id,
                TokenModel.purpose == purpose.value,
                TokenModel.consumed.is_(False),
            )
            .values(consumed=True)
            .execution_options(synchronize_session=False)
        )
        return await self._execute_write("invalidate_for_owner", stmt)

    async def mark_consumed(self, token_id: UUID) -> Result[bool, TokenStoreError]:
        """Set consumed = true if it is still false.

        Args:
            token_id: Token's unique identifier.

        Returns:
            Success(True) if this call flipped the flag, Success(False) otherwise.
        """
        stmt = (
            update(TokenModel)
            .where(TokenModel.id == token_id, TokenModel.consumed.is_(False))
            .values(consumed=True)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute_write("mark_consumed", stmt)
        match result:
            case Success(value=count):
                return Success(value=count > 0)
            case Failure(error=error):
                return Failure(error=error)

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
        stmt = (
            update(TokenModel)
            .where(TokenModel.id == token_id, TokenModel.attempts_remaining > 0)
            .values(attempts_remaining=TokenModel.attempts_remaining - 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute_write("decrement_attempts", stmt)
        match result:
            case Success(value=count):
                return Success(value=count > 0)
            case Failure(error=error):
                return Failure(error=error)

    async def delete_unusable(
        self,
        now: datetime,
        consumed_before: datetime,
    ) -> Result[int, TokenStoreError]:
        """Delete expired tokens and consumed tokens past retention.

        Args:
            now: Current time (UTC).
            consumed_before: Retention cutoff for consumed tokens.

        Returns:
            Success(int): Number of tokens deleted.
        """
        stmt = (
            delete(TokenModel)
            .where(
                or_(
                    TokenModel.expires_at < now,
                    and_(
                        TokenModel.consumed.is_(True),
                        TokenModel.created_at < consumed_before,
                    ),
                )
            )
            .execution_options(synchronize_session=False)
        )
        return await self._execute_write("delete_unusable", stmt)

    async def _execute_write(
        self, operation: str, stmt: Executable
    ) -> Result[int, TokenStoreError]:
        """Run a single UPDATE/DELETE, commit, and return affected rows."""
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_store_unavailable(operation, e))
        return Success(value=result.rowcount)
