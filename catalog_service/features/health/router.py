"""Health check API endpoints.

- Liveness probes: /health/live - Is the process alive?
- Readiness: /health - Can the service reach its database?
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog_service.core.database.base import utcnow
from catalog_service.core.dependencies import DbSessionDep  # noqa: TC001
from catalog_service.core.settings import get_app_settings, get_db_settings
from catalog_service.features.health.schemas import HealthResponse, LivenessResponse

router = APIRouter(prefix="/health", tags=["health"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service health, including a database round trip",
    responses={503: {"description": "A dependency is unreachable"}},
)
async def health_check(session: DbSessionDep, response: Response) -> HealthResponse:
    """Run ``SELECT 1`` against the database within the configured timeout.

    Returns 200 when every check passes and 503 otherwise.
    """
    app_settings = get_app_settings()
    timeout = get_db_settings().health_check_timeout

    database_ok = False
    try:
        await asyncio.wait_for(session.execute(text("SELECT 1")), timeout=timeout)
        database_ok = True
    except TimeoutError:
        logger.warning(
            "Database health check timed out",
            extra={"timeout": timeout},
        )
    except (SQLAlchemyError, OSError) as e:
        logger.warning(
            "Database health check failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )

    if not database_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if database_ok else "unhealthy",
        timestamp=utcnow(),
        service=app_settings.service_name,
        version=app_settings.version,
        checks={"database": database_ok},
    )


@router.get(
    "/live",
    response_model=LivenessResponse,
    summary="Liveness probe",
    description="Answer without touching dependencies",
)
async def liveness() -> LivenessResponse:
    """Kubernetes liveness probe."""
    return LivenessResponse(timestamp=utcnow())
