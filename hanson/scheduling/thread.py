"""
Hanson Thread Affinity Schedulers
=================================

Schedulers that deliver events on one designated thread, typically a UI
thread that owns widgets which must not be touched from anywhere else.

When ``schedule`` is called on the designated thread the closure runs inline,
exactly like ``ImmediateScheduler``. From any other thread the closure is put
on a FIFO queue and ``schedule`` returns immediately; the designated thread
runs queued closures when it calls ``run_pending()`` or while it sits in
``run_forever()``.

Closures queued from the same thread run in the order they were queued.
Closures queued from different threads interleave in arrival order, which is
not specified relative to the publishing calls. A closure that has been queued
still runs after its handler is removed.

Example:
    ```python
    scheduler = MainThreadScheduler()
    name = Observable("Alice")
    name.add_event_handler(update_label, scheduler)

    # From a worker thread: queued, returns immediately
    threading.Thread(target=lambda: name.set("Bob")).start()

    # On the main thread, e.g. from the UI toolkit's idle callback
    scheduler.run_pending()
    ```
"""

import logging
import queue
import threading
from typing import Callable, Optional

from .scheduler import EventScheduler


class ThreadAffinityScheduler(EventScheduler):
    """
    Delivers events on a designated thread.

    Args:
        thread: The designated thread. Defaults to the thread creating the
            scheduler.
    """

    def __init__(self, thread: Optional[threading.Thread] = None) -> None:
        self._thread = thread if thread is not None else threading.current_thread()
        # None is a wake-up marker put by stop()
        self._queue: "queue.SimpleQueue[Optional[Callable[[], None]]]" = (
            queue.SimpleQueue()
        )
        self._stop_requested = threading.Event()

    @property
    def thread(self) -> threading.Thread:
        """The thread this scheduler delivers events on."""
        return self._thread

    @property
    def pending_count(self) -> int:
        """Approximate number of closures waiting to run."""
        return self._queue.qsize()

    def is_current_thread(self) -> bool:
        """Check whether the caller is running on the designated thread."""
        return threading.current_thread() is self._thread

    def schedule(self, closure: Callable[[], None]) -> None:
        if self.is_current_thread():
            closure()
            return

        self._queue.put(closure)

    def run_pending(self) -> int:
        """
        Run every queued closure without blocking.

        Closures queued while draining are run as well. Must be called on the
        designated thread.

        Returns:
            The number of closures that were run.
        """
        self._check_thread("run_pending")

        ran = 0
        saw_stop_marker = False
        while True:
            try:
                closure = self._queue.get_nowait()
            except queue.Empty:
                break

            if closure is None:
                saw_stop_marker = True
                continue

            self._run(closure)
            ran += 1

        # Leave a pending stop request for run_forever()
        if saw_stop_marker and self._stop_requested.is_set():
            self._queue.put(None)

        return ran

    def run_forever(self) -> None:
        """
        Block the designated thread and run closures as they arrive.

        Returns after stop() is called and every closure queued before the
        stop request has run.
        """
        self._check_thread("run_forever")

        try:
            while True:
                closure = self._queue.get()
                if closure is None:
                    if self._stop_requested.is_set():
                        break
                    continue

                self._run(closure)
        finally:
            self._stop_requested.clear()

    def stop(self) -> None:
        """Ask run_forever() to return. Safe to call from any thread."""
        self._stop_requested.set()
        self._queue.put(None)

    def _run(self, closure: Callable[[], None]) -> None:
        # Nobody is waiting on a queued delivery, so errors end up in the log
        try:
            closure()
        except Exception:
            logging.exception(
                f"Error in event handler scheduled on thread '{self._thread.name}'"
            )

    def _check_thread(self, operation: str) -> None:
        if not self.is_current_thread():
            raise RuntimeError(
                f"{operation}() must be called on thread '{self._thread.name}', "
                f"not '{threading.current_thread().name}'"
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(thread={self._thread.name!r})"


class MainThreadScheduler(ThreadAffinityScheduler):
    """Delivers events on the interpreter's main thread."""

    def __init__(self) -> None:
        super().__init__(threading.main_thread())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
