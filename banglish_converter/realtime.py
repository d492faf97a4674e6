import asyncio
import logging
from typing import Callable, Optional

from .config import get_settings
from .converter import get_transliterator

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for one pending debounced call"""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle
        self.done = False

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()

    def cancel(self) -> None:
        if not self.done:
            self._handle.cancel()


class Debouncer:
    """Last call wins: each schedule cancels the pending one.

    Runs on the asyncio event loop of the caller, so at most one call of
    `callback` is ever pending per instance.
    """

    def __init__(self, callback: Callable, delay: float, loop=None):
        self.callback = callback
        self.delay = delay
        self._loop = loop
        self._task: Optional[ScheduledTask] = None
        self._args = ()

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done and not self._task.cancelled

    def schedule(self, *args) -> ScheduledTask:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._args = args
        task = ScheduledTask(loop.call_later(self.delay, self._fire))
        self._task = task
        return task

    __call__ = schedule

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def flush(self) -> bool:
        """Run the pending call now instead of waiting for the timer"""
        if not self.pending:
            return False
        self._task.cancel()
        self._fire()
        return True

    def _fire(self) -> None:
        task, args = self._task, self._args
        self._task = None
        self._args = ()
        if task is not None:
            task.done = True
        logger.debug("Debounced call firing after %.3fs", self.delay)
        self.callback(*args)


def create_realtime_converter(
    callback: Callable[[str], None],
    debounce_ms: Optional[int] = None,
    transliterator=None,
    loop=None,
) -> Debouncer:
    """
    Build a debounced Banglish -> Bengali converter.

    Calling the result with Banglish text schedules a conversion; only the
    last text given within `debounce_ms` is converted and passed to
    `callback`.
    """
    if debounce_ms is None:
        debounce_ms = get_settings().DEBOUNCE_MS
    if debounce_ms < 0:
        raise ValueError(f"debounce_ms must be >= 0, got {debounce_ms}")

    if transliterator is None:
        transliterator = get_transliterator()

    def run(banglish: str) -> None:
        callback(transliterator(banglish))

    return Debouncer(run, debounce_ms / 1000, loop=loop)
