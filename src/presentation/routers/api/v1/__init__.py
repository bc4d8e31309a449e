"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns.

Resources:
    /api/v1/password-reset-tokens     - Password reset token requests
    /api/v1/password-resets           - Password reset execution
    /api/v1/users/{user_id}/tokens    - Token listing per user
    /api/v1/token-cleanups            - Token cleanup runs
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.password_resets import (
    password_reset_tokens_router,
    password_resets_router,
)
from src.presentation.routers.api.v1.tokens import (
    token_cleanups_router,
    user_tokens_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(password_reset_tokens_router)
v1_router.include_router(password_resets_router)
v1_router.include_router(user_tokens_router)
v1_router.include_router(token_cleanups_router)

__all__ = [
    "v1_router",
]
