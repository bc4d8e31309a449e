"""Tokens resource router.

Endpoints:
    GET  /api/v1/users/{user_id}/tokens - List a user's tokens (no secrets)
    POST /api/v1/token-cleanups         - Delete expired and old consumed tokens
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import CleanupTokens
from src.application.commands.handlers.cleanup_tokens_handler import (
    CleanupTokensHandler,
)
from src.application.queries import ListOwnerTokens
from src.application.queries.handlers.list_owner_tokens_handler import (
    ListOwnerTokensHandler,
)
from src.core.container import (
    get_cleanup_tokens_handler,
    get_list_owner_tokens_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from src.schemas.token_schemas import (
    TokenCleanupCreateRequest,
    TokenCleanupCreateResponse,
    TokenListResponse,
    TokenSummaryResponse,
)

user_tokens_router = APIRouter(prefix="/users", tags=["Tokens"])

token_cleanups_router = APIRouter(prefix="/token-cleanups", tags=["Tokens"])


@user_tokens_router.get(
    "/{user_id}/tokens",
    response_model=TokenListResponse,
    responses={
        200: {"description": "Tokens issued to the user", "model": TokenListResponse},
        500: {"description": "Token operation failed", "model": ProblemDetails},
    },
    summary="List user tokens",
    description="List every token issued to a user, newest first. Secrets are never returned.",
)
async def list_user_tokens(
    request: Request,
    user_id: UUID,
    handler: ListOwnerTokensHandler = Depends(get_list_owner_tokens_handler),
) -> TokenListResponse | JSONResponse:
    """List a user's tokens.

    GET /api/v1/users/{user_id}/tokens → 200 OK
    """
    result = await handler.handle(ListOwnerTokens(owner_id=user_id))

    match result:
        case Success(value=data):
            return TokenListResponse(
                tokens=[
                    TokenSummaryResponse(
                        id=item.id,
                        purpose=item.purpose.value,
                        created_at=item.created_at,
                        expires_at=item.expires_at,
                        attempts_remaining=item.attempts_remaining,
                        consumed=item.consumed,
                        is_live=item.is_live,
                        ip_address=item.ip_address,
                    )
                    for item in data.tokens
                ],
                total_count=data.total_count,
                live_count=data.live_count,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@token_cleanups_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenCleanupCreateResponse,
    responses={
        201: {"description": "Cleanup ran", "model": TokenCleanupCreateResponse},
        400: {"description": "Retention out of range", "model": ProblemDetails},
        422: {"description": "retention_days outside 0..3650", "model": ProblemDetails},
        500: {"description": "Token operation failed", "model": ProblemDetails},
    },
    summary="Create token cleanup",
    description=(
        "Delete expired tokens and consumed tokens older than the retention "
        "window. Live tokens are never deleted."
    ),
)
async def create_token_cleanup(
    request: Request,
    data: TokenCleanupCreateRequest | None = None,
    handler: CleanupTokensHandler = Depends(get_cleanup_tokens_handler),
) -> TokenCleanupCreateResponse | JSONResponse:
    """Run a token cleanup.

    POST /api/v1/token-cleanups → 201 Created

    Args:
        request: FastAPI request object.
        data: Optional retention override; an empty body uses settings.
        handler: Cleanup tokens handler (injected).

    Returns:
        TokenCleanupCreateResponse with the number of deleted tokens.
    """
    command = CleanupTokens(retention_days=data.retention_days if data else None)

    result = await handler.handle(command)

    match result:
        case Success(value=cleanup):
            return TokenCleanupCreateResponse(deleted_count=cleanup.deleted_count)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )
