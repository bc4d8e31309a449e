"""Request/response schemas for API endpoints.

Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import PasswordResetCreateRequest, TokenListResponse
"""

from src.schemas.token_schemas import (
    # Password reset
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetTokenCreateRequest,
    PasswordResetTokenCreateResponse,
    # Token listing
    TokenListResponse,
    TokenSummaryResponse,
    # Cleanup
    TokenCleanupCreateRequest,
    TokenCleanupCreateResponse,
)

__all__ = [
    "PasswordResetCreateRequest",
    "PasswordResetCreateResponse",
    "PasswordResetTokenCreateRequest",
    "PasswordResetTokenCreateResponse",
    "TokenCleanupCreateRequest",
    "TokenCleanupCreateResponse",
    "TokenListResponse",
    "TokenSummaryResponse",
]
