"""
Process-wide throttle for outbound API calls.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


class RateLimiter:
    """
    Runs coroutine functions with a minimum spacing between starts and a cap on
    how many are in flight at once. Excess calls wait their turn (FIFO); nothing
    is ever rejected.
    """

    def __init__(
        self,
        min_time: float = 0.3,
        max_concurrent: int = 5,
        logger: Optional[logging.Logger] = None,
    ):
        if min_time < 0:
            raise ValueError("min_time must be >= 0")
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self.min_time = min_time
        self.max_concurrent = max_concurrent
        self.logger = logger or logging.getLogger(__name__)
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._start_lock = asyncio.Lock()
        self._next_start: Optional[float] = None

    async def schedule(self, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """
        Run `func(*args, **kwargs)` once a concurrency slot and a start slot are free.

        Exceptions raised by `func` propagate unchanged.
        """
        async with self._semaphore:
            await self._wait_for_start_slot()
            return await func(*args, **kwargs)

    async def _wait_for_start_slot(self):
        async with self._start_lock:
            loop = asyncio.get_running_loop()
            now = loop.time()
            if self._next_start is not None and now < self._next_start:
                delay = self._next_start - now
                self.logger.debug(f"Rate limiter delaying call by {delay:.3f}s")
                await asyncio.sleep(delay)
                now = max(loop.time(), self._next_start)
            self._next_start = now + self.min_time
