"""Unit tests for startup retry with exponential backoff."""
from __future__ import annotations

import itertools
import random
from unittest.mock import AsyncMock

import pytest

from catalog_service.utils.retry import RetryError, backoff_delays, retry_until_ready


def _flaky(failures: int, exc: Exception | None = None) -> AsyncMock:
    """Probe that raises ``failures`` times, then returns "ready"."""
    error = exc or ConnectionError("refused")
    return AsyncMock(side_effect=[error] * failures + ["ready"])


@pytest.mark.unit
class TestRetryUntilReady:
    """Test suite for retry_until_ready."""

    async def test_returns_on_first_success(self):
        probe = _flaky(0)

        assert await retry_until_ready(probe, operation="db", attempts=3, initial_delay=0.01) == "ready"
        assert probe.await_count == 1

    async def test_succeeds_after_failures(self):
        probe = _flaky(2)

        result = await retry_until_ready(
            probe, operation="db", attempts=3, initial_delay=0.01, jitter=False
        )

        assert result == "ready"
        assert probe.await_count == 3

    async def test_raises_after_last_attempt(self):
        probe = AsyncMock(side_effect=ConnectionError("refused"))

        with pytest.raises(RetryError) as exc_info:
            await retry_until_ready(probe, operation="db.connect", attempts=3, initial_delay=0.01)

        assert probe.await_count == 3
        assert exc_info.value.attempts == 3
        assert exc_info.value.operation == "db.connect"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert "db.connect failed after 3 attempts" in str(exc_info.value)

    async def test_unlisted_exception_propagates_immediately(self):
        probe = _flaky(1, TypeError("bug"))

        with pytest.raises(TypeError):
            await retry_until_ready(
                probe,
                operation="db",
                attempts=3,
                initial_delay=0.01,
                exceptions=(ConnectionError,),
            )

        assert probe.await_count == 1

    async def test_timeout_stops_before_sleeping_past_it(self):
        probe = AsyncMock(side_effect=ConnectionError("refused"))

        with pytest.raises(RetryError) as exc_info:
            await retry_until_ready(
                probe,
                operation="db",
                attempts=10,
                initial_delay=5.0,
                timeout=1.0,
                jitter=False,
            )

        assert probe.await_count == 1
        assert exc_info.value.attempts == 1

    async def test_zero_attempts_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            await retry_until_ready(_flaky(0), operation="db", attempts=0, initial_delay=0.01)


@pytest.mark.unit
class TestBackoffDelays:
    """Test suite for the delay sequence."""

    def test_doubles_without_jitter(self):
        delays = backoff_delays(1.0, 60.0, jitter=False)

        assert list(itertools.islice(delays, 4)) == [1.0, 2.0, 4.0, 8.0]

    def test_capped_at_max_delay(self):
        delays = backoff_delays(1.0, 5.0, jitter=False)

        assert list(itertools.islice(delays, 5)) == [1.0, 2.0, 4.0, 5.0, 5.0]

    def test_jitter_stays_within_range(self):
        delays = backoff_delays(2.0, 60.0, rng=random.Random(11))

        for base, delay in zip([2.0, 4.0, 8.0, 16.0], itertools.islice(delays, 4), strict=True):
            assert base * 0.5 <= delay <= base * 1.5
