"""Pagination settings for listing endpoints.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=25, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size when the client does not pass ``limit``.
        max_limit: Largest page size served; larger requests are capped.

    Example:
        settings = PaginationSettings()
        limit = min(requested_limit, settings.max_limit)
    """

    default_limit: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Default page size when limit not specified",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )

    @model_validator(mode="after")
    def validate_limits(self) -> PaginationSettings:
        """Ensure the default page size fits under the cap."""
        if self.default_limit > self.max_limit:
            msg = "default_limit cannot exceed max_limit"
            raise ValueError(msg)
        return self

    def clamp(self, limit: int) -> int:
        """Cap a requested page size at max_limit."""
        return min(limit, self.max_limit)

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
