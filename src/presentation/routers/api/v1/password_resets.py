"""Password reset routers.

Two resources, both created with POST:

    POST /api/v1/password-reset-tokens  ask for a reset link (always 201)
    POST /api/v1/password-resets        redeem a link and set a new password

Token rejections come back as Problem Details: an unknown, consumed or
malformed token is 404, an expired or exhausted one is 400.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import ConfirmPasswordReset, RequestPasswordReset
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from src.schemas.token_schemas import (
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetTokenCreateRequest,
    PasswordResetTokenCreateResponse,
)

password_reset_tokens_router = APIRouter(
    prefix="/password-reset-tokens",
    tags=["Password Reset Tokens"],
)

password_resets_router = APIRouter(
    prefix="/password-resets",
    tags=["Password Resets"],
)

_PROBLEM = {"model": ProblemDetails}


@password_reset_tokens_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetTokenCreateResponse,
    responses={
        500: {**_PROBLEM, "description": "Token could not be issued"},
    },
    summary="Request a password reset link",
    description=(
        "Issues a reset token and mails the link. The answer is identical "
        "whether or not the address belongs to an active account."
    ),
)
async def create_password_reset_token(
    request: Request,
    data: PasswordResetTokenCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> PasswordResetTokenCreateResponse | JSONResponse:
    """Issue a reset token for `data.email` and mail it.

    The client address and user agent are stored on the token.
    """
    client_ip = request.client.host if request.client else None
    result = await handler.handle(
        RequestPasswordReset(
            email=data.email,
            ip_address=client_ip,
            user_agent=request.headers.get("user-agent"),
        )
    )

    match result:
        case Success():
            return PasswordResetTokenCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@password_resets_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetCreateResponse,
    responses={
        400: {**_PROBLEM, "description": "Expired, out of attempts or weak password"},
        404: {**_PROBLEM, "description": "Unknown or used token, or user gone"},
        500: {**_PROBLEM, "description": "Token store failure"},
    },
    summary="Redeem a password reset link",
    description="Sets a new password using the token from the reset email.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    """Redeem a reset token.

    On success the token is consumed and cannot be used again. A weak
    password leaves the token redeemable.
    """
    result = await handler.handle(
        ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    )

    match result:
        case Success():
            return PasswordResetCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
