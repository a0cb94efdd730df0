"""Context management for structured logging.

Provides automatic context injection into log records using contextvars,
so the request id set by middleware appears on every log line emitted
while that request is handled, without passing it around explicitly.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

# Each async task gets its own copy automatically
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Set logging context for current async task.

    All subsequent log calls in this context will automatically include
    these fields in the log record.

    Args:
        **kwargs: Key-value pairs to add to logging context (e.g. request_id).

    Example:
        ```python
        set_log_context(request_id="abc-123", path="/products")
        logger.info("Processing request")  # Includes request_id and path
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for current async task.

    Called by middleware once a request completes, and useful in tests.
    """
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that automatically injects context into LogRecord.

    Reads the contextvars-based log context and adds its fields to the
    record, making them available to formatters (especially JSONFormatter).
    Existing record attributes are never overwritten.

    Example:
        ```python
        config = {
            "filters": {
                "context": {
                    "()": "catalog_service.infra.logging.context.ContextInjectingFilter"
                }
            },
            "handlers": {"console": {..., "filters": ["context"]}},
        }
        ```
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
