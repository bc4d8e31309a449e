"""Outbound mail port used by the password reset flow."""

from typing import Protocol


class EmailProtocol(Protocol):
    """Delivers the two messages a password reset produces.

    The reset link carries the raw token secret; implementations keep the
    full URL out of INFO and higher log lines.
    """

    async def send_password_reset_email(self, to_email: str, reset_url: str) -> None:
        """Mail the reset link (`{reset_url_base}/reset-password?token=<secret>`)."""
        ...

    async def send_password_changed_notification(self, to_email: str) -> None:
        """Tell the account owner their password was just replaced."""
        ...
