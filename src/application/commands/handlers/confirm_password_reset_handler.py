"""Confirm Password Reset handler.

Flow:
1. Validate the token for redemption (purpose password_reset)
2. Check the new password against the password policy
3. Look up the token owner
4. Hash the new password
5. Consume the token; only the request whose consume applies goes on
6. Store the new password hash
7. Send password changed notification email
8. Return Success(message)

Failure handling:
- Token rejections (not found, expired, exhausted) pass through unchanged
- A weak password fails validation without touching the token
- A missing owner consumes the token, then returns USER_NOT_FOUND
- Of two concurrent redemptions of one token only the consume winner
  writes a password; the other gets TOKEN_NOT_FOUND
- The token is consumed before the password is stored, so a store
  failure while updating the password burns the token and the user has
  to request a new link
- An owner removed between lookup and update returns USER_NOT_FOUND

Architecture:
- Application layer ONLY imports from domain and application layers
- Repositories and services are injected via protocols
"""

from dataclasses import dataclass

from src.application.commands.token_commands import ConfirmPasswordReset
from src.application.services.token_engine import TokenEngine
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenError
from src.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.value_objects import Password


@dataclass
class PasswordResetConfirmResponse:
    """Response data for successful password reset confirmation."""

    message: str = (
        "Password has been reset successfully. Please login with your new password."
    )


class ConfirmPasswordResetHandler:
    """Handler for confirm password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_engine: TokenEngine,
        password_service: PasswordHashingProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize password reset confirmation handler with dependencies.

        Args:
            user_repo: User repository for lookup and password update.
            token_engine: Token lifecycle engine.
            password_service: Password hashing service.
            email_service: Email sending service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._token_engine = token_engine
        self._password_service = password_service
        self._email_service = email_service
        self._logger = logger

    async def handle(
        self, cmd: ConfirmPasswordReset
    ) -> Result[PasswordResetConfirmResponse, DomainError]:
        """Handle confirm password reset command.

        Args:
            cmd: ConfirmPasswordReset command with token and new password.

        Returns:
            Success(PasswordResetConfirmResponse) on successful password reset.
            Failure(TokenError) for token rejections and internal failures.
            Failure(ValidationError) for a password that fails the policy.
            Failure(NotFoundError) if the token owner no longer exists.
        """
        validated = await self._token_engine.validate_for_redemption(
            cmd.token, purpose=TokenPurpose.PASSWORD_RESET
        )
        match validated:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=token):
                pass

        try:
            Password(cmd.new_password)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_TOO_WEAK,
                    message=str(e),
                    field="new_password",
                )
            )

        user = await self._user_repo.find_by_id(token.owner_id)
        if user is None:
            self._logger.warning(
                "Password reset token owner missing",
                token_id=str(token.id),
                owner_id=str(token.owner_id),
            )
            consumed = await self._token_engine.consume(token.id)
            if isinstance(consumed, Failure):
                return Failure(error=consumed.error)
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(token.owner_id),
                )
            )

        password_hash = self._password_service.hash_password(cmd.new_password)

        consumed = await self._token_engine.consume(token.id)
        match consumed:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=False):
                self._logger.info(
                    "Password reset rejected",
                    reason="token_already_consumed",
                    token_id=str(token.id),
                )
                return Failure(
                    error=TokenError(
                        code=ErrorCode.TOKEN_NOT_FOUND,
                        message="Token not found",
                    )
                )

        updated = await self._user_repo.update_password(user.id, password_hash)
        if not updated:
            self._logger.warning(
                "Password reset token owner missing",
                token_id=str(token.id),
                owner_id=str(token.owner_id),
                stage="update_password",
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(token.owner_id),
                )
            )

        await self._email_service.send_password_changed_notification(
            to_email=user.email,
        )

        self._logger.info(
            "Password reset completed",
            user_id=str(user.id),
            token_id=str(token.id),
        )
        return Success(value=PasswordResetConfirmResponse())
