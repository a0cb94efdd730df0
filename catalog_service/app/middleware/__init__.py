"""Middleware configuration for FastAPI application.

Execution order, outermost first:

1. Request ID: tags the request and its log lines
2. Timing: X-Process-Time header and slow request warnings
3. CORS: only when APP_CORS_ORIGINS is set

Starlette applies middleware in reverse order of registration, so they are
added innermost first below.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

from catalog_service.app.middleware.base import HeaderContextMiddleware
from catalog_service.app.middleware.request_id import RequestIDMiddleware
from catalog_service.app.middleware.timing import TimingMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from catalog_service.core.settings import AppSettings, LoggingSettings

logger = logging.getLogger(__name__)

__all__ = [
    "HeaderContextMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
    "configure_middleware",
]


def configure_middleware(
    app: FastAPI,
    app_settings: AppSettings,
    log_settings: LoggingSettings,
) -> None:
    """Configure all middleware for the FastAPI application.

    Environment Variables:
        APP_CORS_ORIGINS: Allowed origins (JSON array); CORS is off when empty
        LOG_INCLUDE_REQUEST_ID: Add the request ID middleware (default: true)
        LOG_LOG_SLOW_REQUESTS: Warn about slow requests (default: true)
        LOG_SLOW_REQUEST_THRESHOLD: Slow request threshold in seconds

    Args:
        app: FastAPI application instance
        app_settings: CORS configuration
        log_settings: Request ID and slow request toggles
    """
    if app_settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=app_settings.cors_allow_credentials,
            allow_methods=app_settings.cors_allow_methods,
            allow_headers=app_settings.cors_allow_headers,
            max_age=app_settings.cors_max_age,
        )

    slow_threshold = (
        log_settings.slow_request_threshold if log_settings.log_slow_requests else None
    )
    app.add_middleware(TimingMiddleware, slow_threshold=slow_threshold)

    if log_settings.include_request_id:
        app.add_middleware(RequestIDMiddleware)

    logger.debug(
        "Middleware configured",
        extra={
            "cors": bool(app_settings.cors_origins),
            "request_id": log_settings.include_request_id,
            "slow_request_threshold": slow_threshold,
        },
    )
