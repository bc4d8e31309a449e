"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, PASSWORD_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Token lifecycle rejections (TOKEN_*)
- Internal failures (TOKEN_OPERATION_FAILED, TOKEN_STORE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_TOO_WEAK = "password_too_weak"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Token redemption rejections (returned to the caller)
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_ATTEMPTS_EXHAUSTED = "token_attempts_exhausted"

    # Opaque internal failure (never broken down for end users)
    TOKEN_OPERATION_FAILED = "token_operation_failed"

    # Token store failures (internal, mapped to TOKEN_OPERATION_FAILED)
    TOKEN_SECRET_COLLISION = "token_secret_collision"
    TOKEN_LIVE_CONFLICT = "token_live_conflict"
    TOKEN_STORE_UNAVAILABLE = "token_store_unavailable"
