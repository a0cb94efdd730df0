"""Logging configuration setup.

Configures the standard library logging tree with:
- dictConfig for declarative configuration
- ContextInjectingFilter on every handler for request-id propagation
- All handlers on the root logger (child loggers propagate)
- JSONL format for machine parsing, or a plain text format for local runs
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

if TYPE_CHECKING:
    from catalog_service.core.settings.logs import LoggingSettings


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from catalog_service.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}

    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    *,
    service_name: str = "catalog-service",
    json_logs: bool = True,
    console_enabled: bool = True,
    console_level: str | None = None,
    file_path: str | Path | None = None,
    file_level: str | None = None,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    include_context: bool = True,
    capture_warnings: bool = True,
    include_uvicorn: bool = True,
    **kwargs: Any,
) -> None:
    """Configure logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Static ``service`` field added to JSON records.
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console/stderr logging.
        console_level: Console handler level. If None, uses log_level.
        file_path: Path to log file. None disables file logging.
        file_level: File handler level. If None, uses log_level.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        include_context: Enable ContextInjectingFilter for auto context.
        capture_warnings: Forward Python warnings to logging system.
        include_uvicorn: Keep uvicorn access logs at INFO; otherwise WARNING.
        **kwargs: Unknown settings, ignored.

    Example:
        from catalog_service.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())

        # Or: direct parameters
        configure_logging(log_level="DEBUG", json_logs=False)
    """
    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs.keys())))

    logging.captureWarnings(capture_warnings)

    path = Path(file_path) if file_path else None
    if path:
        path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(
            log_level=log_level,
            service_name=service_name,
            json_logs=json_logs,
            console_enabled=console_enabled,
            console_level=console_level or log_level,
            file_path=path,
            file_level=file_level or log_level,
            file_max_bytes=file_max_bytes,
            file_backup_count=file_backup_count,
            include_context=include_context,
            include_uvicorn=include_uvicorn,
        )
    )


def build_logging_config(
    *,
    log_level: str,
    service_name: str,
    json_logs: bool,
    console_enabled: bool,
    console_level: str,
    file_path: Path | None,
    file_level: str,
    file_max_bytes: int,
    file_backup_count: int,
    include_context: bool,
    include_uvicorn: bool,
) -> dict[str, Any]:
    """Build the dictConfig dictionary.

    Returns:
        Configuration dict accepted by logging.config.dictConfig.
    """
    formatter = "json" if json_logs else "text"
    handler_filters = ["context"] if include_context else []

    formatters: dict[str, Any] = {
        "json": {
            "()": "catalog_service.infra.logging.formatters.JSONFormatter",
            "static": {"service": service_name},
        },
        "text": {
            "()": "catalog_service.infra.logging.formatters.ContextTextFormatter",
        },
    }

    filters: dict[str, Any] = {}
    if include_context:
        filters["context"] = {
            "()": "catalog_service.infra.logging.context.ContextInjectingFilter",
        }

    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": console_level.upper(),
            "formatter": formatter,
            "filters": handler_filters,
            "stream": "ext://sys.stderr",
        }
    if file_path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": file_level.upper(),
            "formatter": "json",
            "filters": handler_filters,
            "filename": str(file_path),
            "maxBytes": file_max_bytes,
            "backupCount": file_backup_count,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "uvicorn.access": {"level": "INFO" if include_uvicorn else "WARNING"},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
    }
