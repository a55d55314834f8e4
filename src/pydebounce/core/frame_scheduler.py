"""Frame-synchronized scheduler."""

from __future__ import annotations

from .clock import Clock, monotonic_ms
from .scheduler import Scheduler, SchedulerCallback

DEFAULT_FRAME_INTERVAL_MS = 1000.0 / 60.0


class FrameScheduler:
    """Fires callbacks on the next refresh boundary instead of after a delay.

    Frames are boundaries of a fixed ``frame_interval_ms`` grid on ``clock``
    and the requested delay is ignored. Requests are independent
    registrations on ``base``, so one instance can serve several handles.
    """

    def __init__(
        self,
        base: Scheduler,
        *,
        frame_interval_ms: float = DEFAULT_FRAME_INTERVAL_MS,
        clock: Clock | None = None,
    ) -> None:
        if frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")
        self._base = base
        self._frame_interval_ms = float(frame_interval_ms)
        self._clock = clock or monotonic_ms

    @property
    def frame_interval_ms(self) -> float:
        return self._frame_interval_ms

    def delay_to_next_frame(self) -> float:
        elapsed_in_frame = self._clock() % self._frame_interval_ms
        return self._frame_interval_ms - elapsed_in_frame

    def schedule(self, callback: SchedulerCallback, delay_ms: float = 0.0) -> object:
        return self._base.schedule(callback, self.delay_to_next_frame())

    def unschedule(self, handle: object) -> None:
        self._base.unschedule(handle)


__all__ = [
    "DEFAULT_FRAME_INTERVAL_MS",
    "FrameScheduler",
]
