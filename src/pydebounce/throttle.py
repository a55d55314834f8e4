"""Throttle preset over the debounce controller."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .config import coerce_duration
from .core.clock import Clock
from .core.scheduler import Scheduler
from .debounce import debounce


def throttle(
    func: Callable[..., Any] | None = None,
    wait: float | None = None,
    *,
    leading: bool = True,
    trailing: bool = True,
    clock: Clock | None = None,
    scheduler: Scheduler | None = None,
    frame_scheduler: Scheduler | None = None,
) -> Any:
    """Create a wrapper that invokes ``func`` at most once per ``wait`` ms.

    Equivalent to ``debounce`` with ``max_wait`` fixed to ``wait``. The
    trailing edge only runs ``func`` if a call arrived after the last
    invocation.
    """

    return debounce(
        func,
        wait,
        leading=leading,
        trailing=trailing,
        max_wait=coerce_duration(wait),
        clock=clock,
        scheduler=scheduler,
        frame_scheduler=frame_scheduler,
    )


__all__ = [
    "throttle",
]
