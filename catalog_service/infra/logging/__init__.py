"""Logging infrastructure.

Provides structured logging with:
- JSONL format for Loki/Elasticsearch ingestion
- Automatic context injection (request_id, path, ...)
- Per-handler log levels (console vs file)
- Lazy evaluation for expensive debug messages

Basic usage:
    from catalog_service.infra.logging import set_log_context
    import logging

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Processing request")  # Automatically includes request_id

    from catalog_service.infra.logging import get_lazy_logger

    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Expensive: {compute_heavy_data()}")
"""

from catalog_service.infra.logging.config import configure_logging, setup_logging
from catalog_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from catalog_service.infra.logging.formatters import ContextTextFormatter, JSONFormatter
from catalog_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "ContextTextFormatter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
