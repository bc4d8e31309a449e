"""Token lifecycle error types.

Two layers of errors:
- TokenError: what callers of the token engine see (not found, expired,
  exhausted, or the opaque TOKEN_OPERATION_FAILED).
- TokenStoreError: what the token repository reports (secret collision,
  a second live token for the same owner and purpose, or store
  unavailable). The engine translates these and never lets them reach
  HTTP callers.

Usage:
    from src.domain.errors import TokenError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=TokenError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Token has expired",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Token redemption or issue failure.

    Attributes:
        code: ErrorCode enum (TOKEN_NOT_FOUND, TOKEN_EXPIRED,
            TOKEN_ATTEMPTS_EXHAUSTED, TOKEN_OPERATION_FAILED, or
            VALIDATION_FAILED for an out-of-range cleanup retention).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenStoreError(DomainError):
    """Token persistence failure.

    Attributes:
        code: ErrorCode enum (TOKEN_SECRET_COLLISION, TOKEN_LIVE_CONFLICT,
            TOKEN_STORE_UNAVAILABLE).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError
