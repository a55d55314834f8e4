from __future__ import annotations

from collections.abc import Callable
from typing import Any


class ManualClock:
    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def set(self, value: float) -> None:
        self.now = float(value)


class _Entry:
    def __init__(self, due: float, seq: int, callback: Callable[[], Any]):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False


class ManualScheduler:
    """Virtual-time scheduler driven by a ManualClock."""

    def __init__(self, clock: ManualClock):
        self.clock = clock
        self.entries: list[_Entry] = []
        self._seq = 0
        self.scheduled_delays: list[float] = []
        self.unschedule_calls = 0

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> _Entry:
        self._seq += 1
        self.scheduled_delays.append(delay_ms)
        entry = _Entry(self.clock.now + max(0.0, delay_ms), self._seq, callback)
        self.entries.append(entry)
        return entry

    def unschedule(self, handle: object) -> None:
        self.unschedule_calls += 1
        if isinstance(handle, _Entry):
            handle.cancelled = True

    @property
    def live_count(self) -> int:
        return sum(1 for e in self.entries if not e.cancelled and not e.fired)

    def _next_due(self, until: float) -> _Entry | None:
        live = [e for e in self.entries if not e.cancelled and not e.fired and e.due <= until]
        if not live:
            return None
        return min(live, key=lambda e: (e.due, e.seq))

    def advance_to(self, target: float) -> None:
        while True:
            entry = self._next_due(target)
            if entry is None:
                break
            self.clock.set(max(self.clock.now, entry.due))
            entry.fired = True
            entry.callback()
        self.clock.set(max(self.clock.now, target))

    def advance(self, delta: float) -> None:
        self.advance_to(self.clock.now + delta)


class Recorder:
    def __init__(self, result: Callable[..., Any] | None = None, clock: ManualClock | None = None):
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.times: list[float] = []
        self._result = result
        self._clock = clock

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        if self._clock is not None:
            self.times.append(self._clock.now)
        if self._result is not None:
            return self._result(*args, **kwargs)
        return args[0] if args else None

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][0]
