"""Deferred-callback schedulers."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol

SchedulerCallback = Callable[[], Any]


class Scheduler(Protocol):
    def schedule(self, callback: SchedulerCallback, delay_ms: float) -> object: ...
    def unschedule(self, handle: object) -> None: ...


def clamp_delay_ms(delay_ms: float) -> float:
    return max(0.0, float(delay_ms))


class TimerScheduler:
    """Fixed-delay scheduler backed by daemon ``threading.Timer`` threads.

    Callbacks run on the timer thread. Exceptions raised by a callback are
    reported through ``threading.excepthook``.
    """

    def __init__(self, *, daemon: bool = True) -> None:
        self._daemon = daemon

    def schedule(self, callback: SchedulerCallback, delay_ms: float) -> threading.Timer:
        timer = threading.Timer(clamp_delay_ms(delay_ms) / 1000.0, callback)
        timer.daemon = self._daemon
        timer.start()
        return timer

    def unschedule(self, handle: object) -> None:
        # cancel() on a finished or cancelled timer is a no-op
        if isinstance(handle, threading.Timer):
            handle.cancel()


__all__ = [
    "Scheduler",
    "SchedulerCallback",
    "TimerScheduler",
    "clamp_delay_ms",
]
