import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional

from geoapify.errors import PollTimeoutError

log = logging.getLogger(__name__)


class PollResult:
    """Represents the outcome of a single polling iteration.

    Attributes:
        done (bool): True if polling should stop.
        value: The value to return when done is True.
        info: Optional status info from the poll (e.g. a pending batch job).
    """

    def __init__(self, done: bool, value: Any = None, info: Any = None):
        self.done = done
        self.value = value
        self.info = info


async def wait_for(
    poll_status: Callable[..., Awaitable[PollResult]],
    *poll_args: Any,
    interval: float,
    timeout: float,
    on_retry: Optional[Callable[[PollResult], None]] = None,
    on_timeout: Optional[Callable[[float], None]] = None,
) -> Any:
    """Generic async polling loop.

    Repeatedly awaits `poll_status(*poll_args)` until it returns a PollResult with done=True or until the timeout is reached. Errors raised by `poll_status` propagate.

    Args:
        poll_status (callable): Coroutine function returning PollResult.
        *poll_args: Positional args to pass into poll_status on each call.
        interval (float): Seconds to wait between calls.
        timeout (float): Maximum total seconds to poll before aborting.
        on_retry (callable[[PollResult], None], optional):
            Called with the last PollResult before each sleep.
        on_timeout (callable[[float], None], optional):
            Called with elapsed seconds if timeout is exceeded.

    Returns:
        The `.value` attribute from the successful PollResult.

    Raises:
        PollTimeoutError: If the timeout is exceeded.
    """
    start = time.monotonic()
    while True:
        elapsed = time.monotonic() - start
        if elapsed > timeout:
            if on_timeout:
                on_timeout(elapsed)
            log.error("Polling timed out after %.1f seconds", elapsed)
            raise PollTimeoutError(f"Polling timed out after {elapsed:.1f}s")

        result = await poll_status(*poll_args)
        if result.done:
            return result.value

        if on_retry:
            on_retry(result)

        await asyncio.sleep(interval)
