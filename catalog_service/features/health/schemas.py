"""Health check response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response.

    Example:
        ```json
        {
            "status": "healthy",
            "timestamp": "2025-01-01T00:00:00Z",
            "service": "catalog-service",
            "version": "0.1.0",
            "checks": {"database": true}
        }
        ```
    """

    status: Literal["healthy", "unhealthy"] = Field(description="Overall health status")
    timestamp: datetime = Field(description="Check timestamp")
    service: str = Field(min_length=1, max_length=100, description="Service name")
    version: str = Field(min_length=1, max_length=50, description="Service version")
    checks: dict[str, bool] = Field(
        default_factory=dict, description="Individual dependency health checks"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-01-01T00:00:00Z",
                "service": "catalog-service",
                "version": "0.1.0",
                "checks": {"database": True},
            }
        },
    )


class LivenessResponse(BaseModel):
    """Liveness probe response; the process answered."""

    status: Literal["alive"] = "alive"
    timestamp: datetime
