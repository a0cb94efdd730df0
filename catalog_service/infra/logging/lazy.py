"""Lazy evaluation support for logging.

Debug messages in repositories and services are built from lambdas so
that formatting never runs when DEBUG is disabled in production.
"""

from __future__ import annotations

import logging
from typing import Any


class LazyLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that supports lazy evaluation of log messages.

    Callables passed as the message or as format args are only invoked
    when the level is enabled.

    Example:
        ```python
        logger = LazyLoggerAdapter(logging.getLogger(__name__), {})

        logger.debug(lambda: f"Processing {expensive_call()}")
        logger.info("Status: %s", lambda: compute_status())
        ```
    """

    def log(
        self,
        level: int,
        msg: Any,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Log message with lazy evaluation support.

        Args:
            level: Numeric log level (e.g., logging.DEBUG).
            msg: Log message or callable returning message.
            *args: Format arguments (may include callables).
            **kwargs: Additional kwargs for logging.
        """
        if not self.isEnabledFor(level):
            return

        if callable(msg):
            msg = msg()

        evaluated_args = tuple(arg() if callable(arg) else arg for arg in args)
        super().log(level, msg, *evaluated_args, **kwargs)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)


def get_lazy_logger(name: str, **context: Any) -> LazyLoggerAdapter:
    """Get logger with lazy evaluation support.

    Args:
        name: Logger name (usually __name__).
        **context: Optional context to bind to logger.

    Returns:
        Logger adapter with lazy evaluation support.

    Example:
        ```python
        logger = get_lazy_logger(__name__)
        logger.debug(lambda: f"Request data: {expensive_serialize(data)}")
        ```
    """
    return LazyLoggerAdapter(logging.getLogger(name), context or {})
