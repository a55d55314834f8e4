"""Invocation controller: the state machine behind debounce and throttle."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import DebounceConfig
from .core.clock import Clock
from .core.errors import ensure_callable
from .core.scheduler import Scheduler

logger = logging.getLogger("pydebounce")


class _NoReceiver:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_RECEIVER"


NO_RECEIVER: Any = _NoReceiver()


class ControllerState(enum.Enum):
    IDLE = "idle"
    WAITING = "waiting"


@dataclass(slots=True, frozen=True)
class PendingCall:
    """The most recent call request that has not been invoked yet."""

    args: tuple[Any, ...] | list[Any] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    receiver: Any = NO_RECEIVER

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if not isinstance(self.kwargs, dict):
            object.__setattr__(self, "kwargs", dict(self.kwargs))

    def apply(self, operation: Callable[..., Any]) -> Any:
        if self.receiver is NO_RECEIVER:
            return operation(*self.args, **self.kwargs)
        return operation(self.receiver, *self.args, **self.kwargs)


@dataclass(slots=True)
class InvocationRecord:
    last_call_time: float | None = None
    last_invoke_time: float = 0.0
    last_result: Any = None


class InvocationController:
    """Decides, per call request, whether to invoke now, defer, or merge.

    State is ``WAITING`` exactly while a scheduler registration is live.
    The controller does no locking: its owner must serialize ``call``,
    ``cancel``, ``flush`` and scheduler callbacks.
    """

    def __init__(
        self,
        operation: Callable[..., Any],
        config: DebounceConfig,
        *,
        clock: Clock,
        scheduler: Scheduler,
    ) -> None:
        ensure_callable(operation)
        self._operation = operation
        self._config = config
        self._clock = clock
        self._scheduler = scheduler
        self._record = InvocationRecord()
        self._pending_call: PendingCall | None = None
        self._timer: object | None = None
        self._timer_token: object | None = None

    @property
    def config(self) -> DebounceConfig:
        return self._config

    @property
    def state(self) -> ControllerState:
        if self._timer_token is None:
            return ControllerState.IDLE
        return ControllerState.WAITING

    @property
    def record(self) -> InvocationRecord:
        return self._record

    @property
    def pending_call(self) -> PendingCall | None:
        return self._pending_call

    def call(self, pending_call: PendingCall) -> Any:
        time = self._clock()
        is_invoking = self._should_invoke(time)

        self._pending_call = pending_call
        self._record.last_call_time = time

        if is_invoking:
            if self._timer_token is None:
                return self._leading_edge(time)
            if self._config.maxing:
                # tight loop: max_wait elapsed while the window keeps extending
                logger.debug("max_wait reached, forcing invocation at=%s", time)
                self._start_timer(self._config.wait)
                return self._invoke(time)
            logger.debug("invocation due while timer pending, deferring at=%s", time)
        if self._timer_token is None:
            self._start_timer(self._config.wait)
        return self._record.last_result

    def cancel(self) -> None:
        self._clear_timer()
        self._record.last_invoke_time = 0.0
        self._record.last_call_time = None
        self._pending_call = None

    def flush(self) -> Any:
        if self._timer_token is None:
            return self._record.last_result
        return self._trailing_edge(self._clock())

    def pending(self) -> bool:
        return self._timer_token is not None

    def _should_invoke(self, time: float) -> bool:
        last_call_time = self._record.last_call_time
        if last_call_time is None:
            return True
        since_last_call = time - last_call_time
        if since_last_call < 0:
            logger.debug("clock moved backwards by %sms", -since_last_call)
            return True
        if since_last_call >= self._config.wait:
            return True
        since_last_invoke = time - self._record.last_invoke_time
        return self._config.max_wait is not None and since_last_invoke >= self._config.max_wait

    def _remaining_wait(self, time: float) -> float:
        last_call_time = self._record.last_call_time
        since_last_call = 0.0 if last_call_time is None else time - last_call_time
        waiting = self._config.wait - since_last_call
        if self._config.max_wait is None:
            return waiting
        since_last_invoke = time - self._record.last_invoke_time
        return min(waiting, self._config.max_wait - since_last_invoke)

    def _leading_edge(self, time: float) -> Any:
        self._record.last_invoke_time = time
        self._start_timer(self._config.wait)
        if self._config.leading:
            logger.debug("leading edge invocation at=%s", time)
            return self._invoke(time)
        return self._record.last_result

    def _trailing_edge(self, time: float) -> Any:
        self._clear_timer()
        if self._config.trailing and self._pending_call is not None:
            logger.debug("trailing edge invocation at=%s", time)
            return self._invoke(time)
        self._pending_call = None
        return self._record.last_result

    def _timer_expired(self, token: object) -> Any:
        if token is not self._timer_token:
            logger.debug("ignoring stale timer expiry")
            return None
        time = self._clock()
        if self._should_invoke(time):
            return self._trailing_edge(time)
        self._start_timer(self._remaining_wait(time))
        return None

    def _start_timer(self, delay_ms: float) -> None:
        self._clear_timer()
        token = object()

        def _expired() -> Any:
            return self._timer_expired(token)

        self._timer_token = token
        self._timer = self._scheduler.schedule(_expired, delay_ms)

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._scheduler.unschedule(self._timer)
        self._timer = None
        self._timer_token = None

    def _invoke(self, time: float) -> Any:
        pending_call = self._pending_call or PendingCall()
        self._pending_call = None
        self._record.last_invoke_time = time
        result = pending_call.apply(self._operation)
        self._record.last_result = result
        return result


__all__ = [
    "NO_RECEIVER",
    "ControllerState",
    "PendingCall",
    "InvocationRecord",
    "InvocationController",
]
