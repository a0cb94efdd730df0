"""Shared API schemas."""

from catalog_service.core.schemas.problem_details import (
    ProblemDetail,
    ValidationError,
    ValidationProblemDetail,
)

__all__ = ["ProblemDetail", "ValidationError", "ValidationProblemDetail"]
