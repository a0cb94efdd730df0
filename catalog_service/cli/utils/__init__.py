"""CLI utilities for running async operations and formatting output."""

from catalog_service.cli.utils.async_runner import coro, run_async
from catalog_service.cli.utils.formatters import error, header, info, success

__all__ = [
    "coro",
    "error",
    "header",
    "info",
    "run_async",
    "success",
]
