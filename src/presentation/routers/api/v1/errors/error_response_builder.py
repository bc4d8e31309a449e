"""Error response builder for RFC 7807 Problem Details.

Converts domain errors returned through Result types into RFC 7807 JSON
responses. Token rejections carry user-friendly wording; internal token
store failures stay opaque.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# ErrorCode -> (HTTP status, title)
_ERROR_STATUS: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.INVALID_EMAIL: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.INVALID_PASSWORD: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.PASSWORD_TOO_WEAK: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.USER_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "User Not Found"),
    ErrorCode.RESOURCE_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.TOKEN_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Token Not Found"),
    ErrorCode.TOKEN_EXPIRED: (status.HTTP_400_BAD_REQUEST, "Token Expired"),
    ErrorCode.TOKEN_ATTEMPTS_EXHAUSTED: (
        status.HTTP_400_BAD_REQUEST,
        "Token Attempts Exhausted",
    ),
    ErrorCode.TOKEN_OPERATION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
    ),
}

_USER_FRIENDLY_DETAIL: dict[ErrorCode, str] = {
    ErrorCode.TOKEN_NOT_FOUND: "Password reset link is invalid or has already been used.",
    ErrorCode.TOKEN_EXPIRED: "Password reset link has expired. Please request a new one.",
    ErrorCode.TOKEN_ATTEMPTS_EXHAUSTED: (
        "Password reset link has been used too many times. Please request a new one."
    ),
    ErrorCode.USER_NOT_FOUND: "User account not found.",
    ErrorCode.TOKEN_OPERATION_FAILED: "Token operation failed. Please try again later.",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses from domain errors.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=TokenError(
        ...         code=ErrorCode.TOKEN_EXPIRED,
        ...         message="Token has expired",
        ...     ),
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error from a handler's Failure.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=_USER_FRIENDLY_DETAIL.get(error.code, error.message),
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers={"X-Trace-Id": trace_id} if trace_id else None,
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Unmapped codes (internal store failures) answer 500.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.TOKEN_NOT_FOUND)
            404
        """
        return _ERROR_STATUS.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        return _ERROR_STATUS.get(code, (0, "Internal Server Error"))[1]
