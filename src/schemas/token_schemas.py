"""Token request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    POST /api/v1/password-reset-tokens     - Create reset token (request)
    POST /api/v1/password-resets           - Create reset (execute)
    GET  /api/v1/users/{user_id}/tokens    - List a user's tokens
    POST /api/v1/token-cleanups            - Create cleanup (delete unusable tokens)

Token and password formats are checked by the application layer, not here:
a malformed token answers 404 like an unknown one, and a password that
breaks the policy answers 400 with a field error.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.core.constants import TOKEN_RETENTION_MAX_DAYS


# =============================================================================
# Password Reset Request
# =============================================================================


class PasswordResetTokenCreateRequest(BaseModel):
    """Request schema for password reset token creation.

    POST /api/v1/password-reset-tokens
    Returns: 201 Created (always, to prevent user enumeration)
    """

    email: EmailStr = Field(
        ...,
        description="Email address for password reset",
        examples=["user@example.com"],
    )


class PasswordResetTokenCreateResponse(BaseModel):
    """Response schema for password reset token (201 Created).

    Always returns success to prevent user enumeration.
    """

    message: str = Field(
        default="If an account with that email exists, a password reset link has been sent.",
        description="Success message (always same to prevent enumeration)",
    )


# =============================================================================
# Password Reset Confirm
# =============================================================================


class PasswordResetCreateRequest(BaseModel):
    """Request schema for password reset execution.

    POST /api/v1/password-resets
    Returns: 201 Created
    """

    token: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="64-character hex reset token from email",
    )
    new_password: str = Field(
        ...,
        min_length=1,
        max_length=1024,
        description="New password (8-128 chars, mixed case, number, special char)",
        examples=["NewSecurePass456!"],
    )


class PasswordResetCreateResponse(BaseModel):
    """Response schema for password reset (201 Created)."""

    message: str = Field(
        default="Password has been reset successfully. Please login with your new password.",
        description="Success message",
    )


# =============================================================================
# List Tokens
# =============================================================================


class TokenSummaryResponse(BaseModel):
    """Response schema for a single token (secret never included)."""

    id: UUID = Field(..., description="Token identifier")
    purpose: str = Field(
        ...,
        description="Token purpose",
        examples=["password_reset"],
    )
    created_at: datetime = Field(..., description="When the token was issued")
    expires_at: datetime = Field(..., description="When the token stops being redeemable")
    attempts_remaining: int = Field(
        ...,
        ge=0,
        description="Redemption attempts left before the token is exhausted",
    )
    consumed: bool = Field(..., description="Whether the token has been redeemed or superseded")
    is_live: bool = Field(
        ...,
        description="Unconsumed, unexpired and with attempts left",
    )
    ip_address: str | None = Field(
        None,
        description="Client IP address the token was requested from",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "01890a5d-ac96-774b-bcce-b302099a8057",
                "purpose": "password_reset",
                "created_at": "2024-01-15T10:30:00Z",
                "expires_at": "2024-01-15T11:30:00Z",
                "attempts_remaining": 3,
                "consumed": False,
                "is_live": True,
                "ip_address": "192.168.1.1",
            }
        }
    )


class TokenListResponse(BaseModel):
    """Response schema for token list.

    GET /api/v1/users/{user_id}/tokens
    Returns: 200 OK
    """

    tokens: list[TokenSummaryResponse] = Field(
        ...,
        description="Tokens issued to the user, newest first",
    )
    total_count: int = Field(..., description="Total number of tokens returned")
    live_count: int = Field(..., description="Number of tokens still redeemable")


# =============================================================================
# Token Cleanup
# =============================================================================


class TokenCleanupCreateRequest(BaseModel):
    """Request schema for token cleanup.

    POST /api/v1/token-cleanups
    Returns: 201 Created
    """

    retention_days: int | None = Field(
        None,
        ge=0,
        le=TOKEN_RETENTION_MAX_DAYS,
        description="Keep consumed tokens younger than this many days (default from settings)",
        examples=[7],
    )


class TokenCleanupCreateResponse(BaseModel):
    """Response schema for token cleanup (201 Created)."""

    deleted_count: int = Field(..., ge=0, description="Number of tokens deleted")
