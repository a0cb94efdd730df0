"""Exponential backoff for dependencies that may still be starting.

Used at startup, when the application container can come up before the
database accepts connections.

Example:
    await retry_until_ready(
        ping,
        operation="database.connect",
        attempts=5,
        initial_delay=0.5,
        exceptions=(OperationalError,),
    )
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterator

logger = logging.getLogger(__name__)

JITTER_RANGE = (0.5, 1.5)


class RetryError(Exception):
    """Raised when a dependency stays unreachable through every attempt.

    The last failure is chained as ``__cause__``.
    """

    def __init__(self, operation: str, attempts: int, last_exception: Exception) -> None:
        self.operation = operation
        self.attempts = attempts
        self.last_exception = last_exception
        super().__init__(f"{operation} failed after {attempts} attempts: {last_exception}")


def backoff_delays(
    initial_delay: float,
    max_delay: float,
    *,
    jitter: bool = True,
    rng: random.Random | None = None,
) -> Iterator[float]:
    """Yield ``initial_delay * 2**n`` capped at ``max_delay``.

    With jitter each delay is scaled by a factor drawn from ``JITTER_RANGE``.
    """
    rng = rng or random.Random()
    delay = initial_delay
    while True:
        capped = min(delay, max_delay)
        yield capped * rng.uniform(*JITTER_RANGE) if jitter else capped
        delay *= 2


async def retry_until_ready[R](
    probe: Callable[[], Awaitable[R]],
    *,
    operation: str,
    attempts: int,
    initial_delay: float,
    max_delay: float = 30.0,
    timeout: float | None = None,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    jitter: bool = True,
) -> R:
    """Await ``probe`` until it succeeds or the attempt/time budget runs out.

    Args:
        probe: Zero-argument coroutine function checking the dependency.
        operation: Name used in logs and in the raised error.
        attempts: Total calls to ``probe``, including the first.
        initial_delay: Sleep before the second call, in seconds.
        max_delay: Upper bound for a single sleep.
        timeout: Stop once the next sleep would end past this many seconds.
        exceptions: Failures that mean "not ready yet".
        jitter: Randomize sleeps around the backoff curve.

    Returns:
        Whatever ``probe`` returns on its first success.

    Raises:
        RetryError: When the budget is exhausted. Exceptions outside
            ``exceptions`` propagate from the first call that raises them.
    """
    started = time.monotonic()
    delays = backoff_delays(initial_delay, max_delay, jitter=jitter)

    for attempt in range(1, attempts + 1):
        try:
            return await probe()
        except exceptions as exc:
            delay = next(delays)
            out_of_time = timeout is not None and time.monotonic() - started + delay > timeout
            if attempt == attempts or out_of_time:
                logger.error(
                    f"{operation} still failing after {attempt} attempts",
                    extra={"operation": operation, "attempts": attempt, "error": str(exc)},
                )
                raise RetryError(operation, attempt, exc) from exc

            logger.warning(
                f"{operation} not ready, retrying in {delay:.2f}s (attempt {attempt}/{attempts})",
                extra={
                    "operation": operation,
                    "attempt": attempt,
                    "max_attempts": attempts,
                    "delay": delay,
                    "error": str(exc),
                },
            )
        await asyncio.sleep(delay)

    msg = f"attempts must be at least 1, got {attempts}"
    raise ValueError(msg)


__all__ = ["RetryError", "backoff_delays", "retry_until_ready"]
