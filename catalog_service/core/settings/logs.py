"""Logging configuration settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Structured logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=INFO, LOG_JSON=true, LOG_FILE_ENABLED=false
    """

    # ──────────────────────────────────────────────────────────────
    # Basic configuration
    # ──────────────────────────────────────────────────────────────

    service_name: str = Field(
        default="catalog-service",
        description="Service name to include in log records (static field in JSON)",
    )

    level: LogLevel = Field(
        default="INFO",
        description="Root logger level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
    )

    json_logs: bool = Field(
        default=True,
        validation_alias=AliasChoices("LOG_JSON", "LOG_JSON_LOGS"),
        description="Enable JSON Lines (JSONL) formatted structured logs",
    )

    # ──────────────────────────────────────────────────────────────
    # Handlers
    # ──────────────────────────────────────────────────────────────

    console_enabled: bool = Field(
        default=True,
        description="Enable console/stdout logging",
    )

    console_level: LogLevel | None = Field(
        default=None,
        description="Console handler log level. If None, uses root level.",
    )

    file_enabled: bool = Field(
        default=False,
        description="Enable file logging. When False, file_path is ignored.",
    )

    file_path: Path | None = Field(
        default=Path("logs/catalog-service.log.jsonl"),
        description="Path to log file.",
    )

    file_level: LogLevel | None = Field(
        default=None,
        description="File handler log level. If None, uses root level.",
    )

    file_max_bytes: int = Field(
        default=10_485_760,  # 10 MiB
        ge=1024,
        le=1_073_741_824,
        description="Maximum log file size in bytes before rotation (10MB default, max 1GB).",
    )

    file_backup_count: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Number of rotated log files to keep.",
    )

    # ──────────────────────────────────────────────────────────────
    # Context injection
    # ──────────────────────────────────────────────────────────────

    include_context: bool = Field(
        default=True,
        description="Enable automatic context injection into log records via ContextInjectingFilter",
    )

    capture_warnings: bool = Field(
        default=True,
        description="Forward Python `warnings` module output to the logging system.",
    )

    # ──────────────────────────────────────────────────────────────
    # FastAPI-specific features
    # ──────────────────────────────────────────────────────────────

    include_uvicorn: bool = Field(
        default=True,
        description="Include Uvicorn access logs in output",
    )

    include_request_id: bool = Field(
        default=True,
        description="Include request ID in structured logs for tracing",
    )

    log_slow_requests: bool = Field(
        default=True,
        description="Log requests that exceed slow_request_threshold",
    )

    slow_request_threshold: float = Field(
        default=1.0,
        ge=0.01,
        le=60.0,
        description="Threshold in seconds for logging slow requests",
    )

    # ──────────────────────────────────────────────────────────────
    # Computed / helper fields
    # ──────────────────────────────────────────────────────────────

    @computed_field
    @property
    def effective_file_path(self) -> Path | None:
        """Return the file path only when file logging is enabled."""
        if not self.file_enabled:
            return None
        return self.file_path

    @computed_field
    @property
    def level_int(self) -> int:
        """Get numeric log level for use with logging module."""
        return getattr(logging, self.level.upper(), logging.INFO)

    @computed_field
    @property
    def effective_console_level(self) -> LogLevel:
        """Get effective console handler level (falls back to root level)."""
        return self.console_level or self.level

    @computed_field
    @property
    def effective_file_level(self) -> LogLevel:
        """Get effective file handler level (falls back to root level)."""
        return self.file_level or self.level

    @field_validator("level", "console_level", "file_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str | None) -> str | None:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Return kwargs suitable for setup_logging(...).

        Returns:
            Dictionary with all logging configuration parameters.
        """
        return {
            "service_name": self.service_name,
            "log_level": self.level,
            "json_logs": self.json_logs,
            "console_enabled": self.console_enabled,
            "console_level": self.effective_console_level,
            "file_path": str(self.effective_file_path) if self.effective_file_path else None,
            "file_level": self.effective_file_level,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "include_context": self.include_context,
            "capture_warnings": self.capture_warnings,
            "include_uvicorn": self.include_uvicorn,
        }

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,  # Ignore empty string env vars
    )
