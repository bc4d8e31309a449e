"""Centralized constants for internal implementation details.

These are fixed properties of the token engine and password policy, NOT
environment-specific configuration. For tunable values (TTLs, retention,
retry budget) use `src/core/config.py`.

Example:
    >>> from src.core.constants import TOKEN_BYTES
    >>> secret = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token secrets
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of random bytes in a token secret (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of the hex-encoded token secret (TOKEN_BYTES * 2)."""

TOKEN_PREVIEW_LENGTH: int = 8
"""Number of leading secret characters that may appear in logs."""


# =============================================================================
# Token attempt counter bounds
# =============================================================================

TOKEN_ATTEMPTS_MIN: int = 0
"""Lowest value attempts_remaining can reach."""

TOKEN_ATTEMPTS_MAX: int = 5
"""Highest value attempts_remaining may be created with."""


# =============================================================================
# Cleanup retention
# =============================================================================

TOKEN_RETENTION_MAX_DAYS: int = 3650
"""Longest retention window cleanup accepts (ten years)."""


# =============================================================================
# Password policy
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
PASSWORD_MAX_LENGTH: int = 128
PASSWORD_SPECIAL_CHARACTERS: str = "@$!%*?&"
