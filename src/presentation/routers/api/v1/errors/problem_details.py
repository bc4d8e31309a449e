"""Error body models (RFC 7807 Problem Details).

Every non-2xx answer from the API carries a ProblemDetails body. Token
rejections, weak passwords and request validation failures all share it,
so clients parse one shape.

See https://tools.ietf.org/html/rfc7807
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """One field-level problem inside a validation failure."""

    field: str = Field(..., description="Offending request field")
    code: str = Field(..., description="Machine-readable reason")
    message: str = Field(..., description="Reason for humans")


class ProblemDetails(BaseModel):
    """Problem Details body.

    `type` is built from settings.api_base_url and the error code, so a
    token that ran out of attempts answers with
    `{api_base_url}/errors/token_attempts_exhausted`. `errors` is only
    present for field validation failures; `trace_id` echoes X-Trace-Id.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "http://localhost:8000/errors/token_expired",
                "title": "Token Expired",
                "status": 400,
                "detail": "Password reset link has expired. Please request a new one.",
                "instance": "/api/v1/password-resets",
                "trace_id": "550e8400-e29b-41d4-a716-446655440000",
            }
        }
    )

    type: str = Field(..., description="Problem type URI")
    title: str = Field(..., description="Summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Explanation of this occurrence")
    instance: str = Field(..., description="Request path that failed")
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Field errors, validation failures only"
    )
    trace_id: str | None = Field(default=None, description="Request trace ID")
