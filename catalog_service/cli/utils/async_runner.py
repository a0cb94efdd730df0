"""Utilities for running async operations in CLI commands."""

from __future__ import annotations

import asyncio
from functools import wraps
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine


def run_async[T](coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion in a fresh event loop.

    Args:
        coro: The coroutine to run

    Returns:
        The result of the coroutine
    """
    return asyncio.run(coro)


def coro[T](f: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """Decorator that makes an async function synchronous for Click.

    Usage:
        @cli.command()
        @coro
        async def my_command():
            result = await some_async_function()
            click.echo(result)
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return run_async(f(*args, **kwargs))

    return wrapper
