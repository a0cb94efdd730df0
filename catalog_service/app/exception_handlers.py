"""Global exception handlers for FastAPI application.

Every error leaves the service as an RFC 7807 Problem Details body.
Repository errors are mapped to their HTTP counterparts here so feature
routers never translate them by hand.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_service.core.database import (
    InvalidCursorError,
    NotFoundError,
    RepositoryError,
    StorageUnavailableError,
)
from catalog_service.core.exceptions import (
    AppException,
    BadRequestException,
    NotFoundException,
    ServiceUnavailableException,
)
from catalog_service.core.schemas import ProblemDetail, ValidationError, ValidationProblemDetail

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _create_problem_detail(
    status_code: int,
    detail: str,
    type_: str = "about:blank",
    title: str | None = None,
    instance: str | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create RFC 7807 Problem Details response.

    Args:
        status_code: HTTP status code.
        detail: Human-readable error description.
        type_: Error type identifier.
        title: Short human-readable summary.
        instance: URI identifying this occurrence.
        extra: Additional context information.

    Returns:
        Dictionary representing the problem detail.
    """
    problem = ProblemDetail(
        type=type_,
        title=title or AppException._default_title(status_code),
        status=status_code,
        detail=detail,
        instance=instance,
    )

    response_data = problem.model_dump(mode="json", exclude_none=True)
    if extra:
        response_data.update(extra)

    return response_data


def _to_app_exception(exc: RepositoryError) -> AppException:
    """Map a repository error onto its HTTP exception."""
    if isinstance(exc, NotFoundError):
        return NotFoundException(
            detail=exc.message,
            extra={k: str(v) for k, v in exc.identifier.items()},
        )
    if isinstance(exc, InvalidCursorError):
        return BadRequestException(
            detail=exc.message,
            type="invalid-cursor",
            extra={"cursor": exc.cursor},
        )
    if isinstance(exc, StorageUnavailableError):
        return ServiceUnavailableException(detail=exc.message)
    return AppException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing your request",
        type="internal-error",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions.

    Converts AppException instances into RFC 7807 Problem Details
    responses.

    Args:
        request: The FastAPI request object.
        exc: The application exception that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    logger.warning(
        "Application exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )

    problem_data = _create_problem_detail(
        status_code=exc.status_code,
        detail=exc.detail,
        type_=exc.type,
        title=exc.title,
        instance=exc.instance or request.url.path,
        extra=exc.extra,
    )

    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=exc.status_code, content=problem_data)


async def repository_exception_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Handle repository errors that reached the HTTP boundary.

    Storage outages are logged at ERROR with the underlying cause; the
    client only sees a generic 503 without driver details.
    """
    if isinstance(exc, StorageUnavailableError):
        logger.error(
            "Storage unavailable",
            extra={
                "request_id": _get_request_id(request),
                "path": request.url.path,
                "method": request.method,
                "operation": exc.operation,
                "reason": exc.reason,
                "cause": str(exc.__cause__) if exc.__cause__ else None,
            },
        )
    return await app_exception_handler(request, _to_app_exception(exc))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Converts validation errors into RFC 7807 Problem Details format with
    field-level error information.

    Args:
        request: The FastAPI request object.
        exc: The validation error that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    validation_errors = [
        ValidationError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            type=error["type"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_count": len(validation_errors),
            "fields": [e.field for e in validation_errors],
        },
    )

    problem = ValidationProblemDetail(
        type="validation-error",
        title="Validation Error",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Request validation failed for {len(validation_errors)} field(s)",
        instance=request.url.path,
        errors=validation_errors,
    )

    response_data = problem.model_dump(mode="json", exclude_none=True)
    if request_id:
        response_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=response_data)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Logs the full traceback and returns a generic 500 without internal
    details.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    logger.error(
        "Unexpected exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        },
        exc_info=exc,
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing your request",
        type_="internal-error",
        title="Internal Server Error",
        instance=request.url.path,
    )

    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=problem_data)


def configure_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Args:
        app: The FastAPI application instance.

    Example:
        app = FastAPI()
        configure_exception_handlers(app)
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RepositoryError, repository_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.debug("Exception handlers configured")
