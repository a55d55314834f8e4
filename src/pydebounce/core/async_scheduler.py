"""Event-loop based scheduler."""

from __future__ import annotations

import asyncio

from .scheduler import SchedulerCallback, clamp_delay_ms


class AsyncioScheduler:
    """Fixed-delay scheduler on an asyncio event loop (``loop.call_later``).

    When no loop is given, the running loop at the first ``schedule`` call is
    used, so the scheduler must first be used from inside that loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, callback: SchedulerCallback, delay_ms: float) -> asyncio.TimerHandle:
        loop = self._resolve_loop()
        return loop.call_later(clamp_delay_ms(delay_ms) / 1000.0, callback)

    def unschedule(self, handle: object) -> None:
        if isinstance(handle, asyncio.TimerHandle):
            handle.cancel()


__all__ = [
    "AsyncioScheduler",
]
