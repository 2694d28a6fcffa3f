"""Timer-backed scheduler for deferred router callbacks."""

import threading
from collections.abc import Callable


class TimerScheduler:
    """Run callbacks on daemon timer threads.

    Callbacks run off the caller's thread; the router serializes its
    transitions with its own lock.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()
