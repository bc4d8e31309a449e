"""Request Password Reset handler.

Flow:
1. Normalize email and look up the user
2. Unknown or inactive user: log and return Success (no user enumeration)
3. Issue a password_reset token (invalidates the previous one)
4. Send the reset link by email
5. Return Success(message)

Security:
- ALWAYS returns the same success message for unknown accounts
- Only the token engine's opaque TOKEN_OPERATION_FAILED is surfaced

Architecture:
- Application layer ONLY imports from domain and application layers
- Repositories and services are injected via protocols
"""

from dataclasses import dataclass

from src.application.commands.token_commands import RequestPasswordReset
from src.application.services.token_engine import TokenEngine
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenPurpose
from src.domain.errors import TokenError
from src.domain.protocols import EmailProtocol, LoggerProtocol, UserRepository


@dataclass
class PasswordResetRequestResponse:
    """Response data for password reset request.

    Note: Always the same message to prevent user enumeration.
    """

    message: str = (
        "If an account with that email exists, a password reset link has been sent."
    )


class RequestPasswordResetHandler:
    """Handler for request password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_engine: TokenEngine,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        reset_url_base: str,
    ) -> None:
        """Initialize password reset request handler with dependencies.

        Args:
            user_repo: User repository for email lookup.
            token_engine: Token lifecycle engine.
            email_service: Email sending service.
            logger: Structured logger.
            reset_url_base: Frontend base URL for reset links.
        """
        self._user_repo = user_repo
        self._token_engine = token_engine
        self._email_service = email_service
        self._logger = logger
        self._reset_url_base = reset_url_base.rstrip("/")

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResponse, TokenError]:
        """Handle request password reset command.

        Args:
            cmd: RequestPasswordReset command with email and request metadata.

        Returns:
            Success(PasswordResetRequestResponse) whether or not the account
            exists. Failure(TokenError) only when issuing the token fails.
        """
        email = cmd.email.strip().lower()
        user = await self._user_repo.find_by_email(email)

        if user is None or not user.can_reset_password():
            self._logger.info(
                "Password reset requested for unavailable account",
                reason="user_not_found" if user is None else "user_inactive",
            )
            return Success(value=PasswordResetRequestResponse())

        issued = await self._token_engine.issue(
            user.id,
            TokenPurpose.PASSWORD_RESET,
            ip_address=cmd.ip_address,
            user_agent=cmd.user_agent,
        )
        match issued:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=token):
                reset_url = f"{self._reset_url_base}/reset-password?token={token.secret}"

        await self._email_service.send_password_reset_email(
            to_email=user.email,
            reset_url=reset_url,
        )

        self._logger.info(
            "Password reset requested",
            user_id=str(user.id),
            token_id=str(token.id),
        )
        return Success(value=PasswordResetRequestResponse())
