"""
Hanson EventLoopScheduler - asyncio Loop Affinity
=================================================

Delivers events on the thread that runs an asyncio event loop. Publishing from
inside the loop runs handlers inline; publishing from any other thread hands
the delivery to ``loop.call_soon_threadsafe``, which keeps FIFO order per
publishing thread.
"""

import asyncio
from typing import Callable, Optional

from .scheduler import EventScheduler


class EventLoopScheduler(EventScheduler):
    """
    Delivers events on an asyncio event loop.

    Args:
        loop: The loop to deliver on. Defaults to the running loop, so the
            scheduler can be created from inside a coroutine without arguments.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop if loop is not None else asyncio.get_running_loop()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def is_current_thread(self) -> bool:
        """Check whether the caller is running inside this scheduler's loop."""
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def schedule(self, closure: Callable[[], None]) -> None:
        if self.is_current_thread():
            closure()
            return

        self._loop.call_soon_threadsafe(closure)
