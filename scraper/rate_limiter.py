"""Fixed pacing between successive requests."""
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Enforces a pause of ``min_interval`` seconds after each request finishes.

    Callers ``acquire()`` before a request and ``release()`` once it has
    completed (successfully or not). The next ``acquire()`` waits until
    ``min_interval`` has passed since that release, however long the
    request itself took.
    """

    def __init__(
        self,
        min_interval: float = 1.5,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None

    def acquire(self) -> float:
        """
        Wait for the next slot.

        Returns:
            Seconds spent waiting
        """
        waited = 0.0
        if self._last is not None:
            remaining = self.min_interval - (self._clock() - self._last)
            if remaining > 0:
                logger.debug(f"Pacing: waiting {remaining:.2f}s")
                self._sleep(remaining)
                waited = remaining
        self._last = self._clock()
        return waited

    def release(self) -> None:
        """Mark the end of the current request; the pause starts now."""
        self._last = self._clock()
