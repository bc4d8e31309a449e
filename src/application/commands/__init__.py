"""Commands - Write operations that change state.

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.token_commands import (
    CleanupTokens,
    ConfirmPasswordReset,
    RequestPasswordReset,
)

__all__ = [
    "CleanupTokens",
    "ConfirmPasswordReset",
    "RequestPasswordReset",
]
