"""Retry with exponential backoff for transient API failures.

Only 429 and 5xx responses are retried. A `Retry-After` header holding a
whole number of seconds replaces the computed backoff for that wait. Waits
are plain `asyncio.sleep` calls, so cancelling the caller's task aborts a
pending retry immediately.
"""

import asyncio
import logging
import random
import re
from typing import Awaitable, Callable, Optional, TypeVar

from geoapify.config import RetryConfig
from geoapify.errors import RetryableError

log = logging.getLogger(__name__)

T = TypeVar("T")

_SECONDS = re.compile(r"\+?[0-9]+")


def is_retryable(status_code: int) -> bool:
    """True for 429 (rate limited) and any 5xx status."""
    return status_code == 429 or status_code >= 500


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Returns the whole seconds in a `Retry-After` value, or None.

    HTTP dates, fractions and negative numbers are not honored.
    """
    if value is None or not _SECONDS.fullmatch(value):
        return None
    return int(value)


class RetryPolicy:
    """Runs one logical call as a bounded sequence of attempts."""

    def __init__(
        self,
        config: RetryConfig,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            config (RetryConfig): Retry limits and delays.
            sleep (callable): Awaitable used to wait between attempts.
            rng (random.Random, optional): Source of jitter; the module-level
                generator is used when omitted.
        """
        self.config = config
        self._sleep = sleep
        self._rng = rng or random

    def compute_delay(self, attempt: int, retry_after: Optional[str] = None) -> float:
        """Seconds to wait after the zero-indexed `attempt` failed."""
        seconds = parse_retry_after(retry_after)
        if seconds is not None:
            return float(seconds)

        backoff = min(
            self.config.initial_delay * (2**attempt),
            self.config.max_delay,
        )
        # 50-100% of the capped backoff
        return backoff * self._rng.uniform(0.5, 1.0)

    async def run(self, attempt_fn: Callable[[], Awaitable[T]]) -> T:
        """Awaits `attempt_fn` until it succeeds or stops being retryable.

        Args:
            attempt_fn (callable): Performs one attempt. It raises
                RetryableError for failures worth another try; anything else
                it raises propagates untouched.

        Returns:
            Whatever the first successful attempt returns.

        Raises:
            APIError: The last failure once retries are exhausted.
            asyncio.CancelledError: If the caller cancels during a wait.
        """
        attempt = 0
        while True:
            try:
                return await attempt_fn()
            except RetryableError as e:
                if attempt >= self.config.max_retries:
                    if self.config.max_retries:
                        log.error(
                            f"Giving up after {attempt + 1} attempts: {e.error}"
                        )
                    raise e.error from None

                delay = self.compute_delay(attempt, e.retry_after)
                log.warning(
                    f"HTTP {e.error.status_code} on attempt "
                    f"{attempt + 1}/{self.config.max_retries + 1}, "
                    f"retrying in {delay:.2f}s"
                )
                await self._sleep(delay)
                attempt += 1
