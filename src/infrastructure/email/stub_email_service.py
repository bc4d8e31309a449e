"""Stub email service.

Implements EmailProtocol by writing structured log lines instead of
sending mail. Used in every environment until a real provider exists.

The reset URL carries the full token secret, so it is only logged at
DEBUG level; INFO lines carry the recipient and a preview.
"""

from src.core.constants import TOKEN_PREVIEW_LENGTH
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email service that logs instead of sending.

    Attributes:
        sent: (kind, recipient) pairs, in send order.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize stub email service.

        Args:
            logger: Structured logger.
        """
        self._logger = logger
        self.sent: list[tuple[str, str]] = []

    async def send_password_reset_email(
        self,
        to_email: str,
        reset_url: str,
    ) -> None:
        """Log a password reset email.

        Args:
            to_email: Recipient email address.
            reset_url: Full URL with password reset token.
        """
        _, _, token = reset_url.partition("token=")
        self.sent.append(("password_reset", to_email))
        self._logger.info(
            "Password reset email sent (stub)",
            to_email=to_email,
            token_preview=f"{token[:TOKEN_PREVIEW_LENGTH]}...",
        )
        self._logger.debug("Password reset link (stub)", reset_url=reset_url)

    async def send_password_changed_notification(
        self,
        to_email: str,
    ) -> None:
        """Log a password changed notification.

        Args:
            to_email: Recipient email address.
        """
        self.sent.append(("password_changed", to_email))
        self._logger.info("Password changed notification sent (stub)", to_email=to_email)
