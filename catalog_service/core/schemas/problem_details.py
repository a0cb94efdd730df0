"""RFC 7807 Problem Details schemas for error responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Provides a standardized way to carry machine-readable details
    of errors in HTTP responses.

    See: https://datatracker.ietf.org/doc/html/rfc7807

    Example:
        return JSONResponse(
            status_code=404,
            content=ProblemDetail(
                type="not-found",
                title="Not Found",
                status=404,
                detail="Product not found with id='abc123'",
                instance="/products/abc123",
            ).model_dump(exclude_none=True),
        )
    """

    type: str = Field(
        default="about:blank",
        min_length=1,
        max_length=200,
        description="URI reference identifying the problem type",
    )
    title: str = Field(
        min_length=1, max_length=200, description="Short, human-readable summary of the problem"
    )
    status: int = Field(ge=100, le=599, description="HTTP status code")
    detail: str | None = Field(
        default=None,
        max_length=2000,
        description="Human-readable explanation specific to this occurrence",
    )
    instance: str | None = Field(
        default=None,
        max_length=500,
        description="URI reference identifying the specific occurrence",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "invalid-cursor",
                "title": "Bad Request",
                "status": 400,
                "detail": "Cursor '3f0c...' does not reference an existing Product",
                "instance": "http://localhost:8000/products/cursor?cursor=3f0c...",
            }
        },
        str_strip_whitespace=True,
    )


class ValidationError(BaseModel):
    """Single field-level validation failure."""

    field: str = Field(description="Dotted location of the invalid field, e.g. body.price")
    message: str = Field(description="Validation message")
    type: str = Field(description="Validation error type, e.g. greater_than")
    value: Any | None = Field(default=None, description="Rejected input value")


class ValidationProblemDetail(ProblemDetail):
    """Problem details carrying the list of field errors (HTTP 422)."""

    errors: list[ValidationError] = Field(
        default_factory=list,
        description="Field-level validation errors",
    )


__all__ = ["ProblemDetail", "ValidationError", "ValidationProblemDetail"]
