"""A wait group that limits how many tasks run at once."""

from __future__ import annotations

import threading


class WaitGroupPool:
    """Counts running tasks and blocks ``add`` once ``size`` are running.

    A size of 0 or less means no limit.
    """

    def __init__(self, size: int = 0) -> None:
        self._slots = threading.BoundedSemaphore(size) if size > 0 else None
        self._pending = 0
        self._cond = threading.Condition()

    def add(self) -> None:
        """Register a task, waiting for a free slot first."""
        if self._slots is not None:
            self._slots.acquire()
        with self._cond:
            self._pending += 1

    def done(self) -> None:
        """Mark one task as finished and free its slot."""
        with self._cond:
            if self._pending <= 0:
                raise ValueError("negative WaitGroupPool counter")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()
        if self._slots is not None:
            self._slots.release()

    def wait(self) -> None:
        """Block until every registered task is done."""
        with self._cond:
            self._cond.wait_for(lambda: self._pending == 0)