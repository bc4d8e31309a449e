"""Domain errors package.

Usage:
    from src.domain.errors import TokenError, TokenStoreError
"""

from src.domain.errors.token_error import TokenError, TokenStoreError

__all__ = [
    "TokenError",
    "TokenStoreError",
]
