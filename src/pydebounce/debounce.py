"""Public debounce entrypoint."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import DebounceConfig
from .controller import NO_RECEIVER, InvocationController, PendingCall
from .core.clock import Clock, monotonic_ms
from .core.errors import ConfigurationError, ensure_callable
from .core.scheduler import Scheduler, SchedulerCallback, TimerScheduler

logger = logging.getLogger("pydebounce")


def validate_debounce_config(config: DebounceConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc), field="config") from exc


class _GuardedScheduler:
    """Runs scheduler callbacks under the owner's lock."""

    def __init__(self, delegate: Scheduler, lock: threading.RLock) -> None:
        self._delegate = delegate
        self._lock = lock

    def schedule(self, callback: SchedulerCallback, delay_ms: float) -> object:
        def _guarded() -> Any:
            with self._lock:
                return callback()

        return self._delegate.schedule(_guarded, delay_ms)

    def unschedule(self, handle: object) -> None:
        self._delegate.unschedule(handle)


class Debounced:
    """Wrapped operation whose invocations are coalesced per ``config``.

    Calls return the result of the last actual invocation. The handle
    serializes its own operations and timer callbacks, so it can be used with
    thread-backed schedulers.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        config: DebounceConfig | None = None,
        *,
        clock: Clock | None = None,
        scheduler: Scheduler | None = None,
        frame_scheduler: Scheduler | None = None,
    ) -> None:
        ensure_callable(func)
        # func.__dict__ is not copied so it cannot shadow handle methods
        functools.update_wrapper(self, func, updated=())
        self._config = config or DebounceConfig()
        validate_debounce_config(self._config)

        if self._config.use_frame_sync:
            if frame_scheduler is None:
                raise ConfigurationError(
                    "use_frame_sync requires a frame scheduler",
                    field="frame_scheduler",
                )
            base_scheduler = frame_scheduler
        else:
            base_scheduler = scheduler or TimerScheduler()

        self._lock = threading.RLock()
        self._controller = InvocationController(
            func,
            self._config,
            clock=clock or monotonic_ms,
            scheduler=_GuardedScheduler(base_scheduler, self._lock),
        )
        logger.debug(
            "debounced %s wait=%s leading=%s trailing=%s max_wait=%s frame_sync=%s",
            getattr(func, "__qualname__", func),
            self._config.wait,
            self._config.leading,
            self._config.trailing,
            self._config.max_wait,
            self._config.use_frame_sync,
        )

    @property
    def config(self) -> DebounceConfig:
        return self._config

    def invoke(
        self,
        args: Iterable[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        receiver: Any = NO_RECEIVER,
    ) -> Any:
        pending_call = PendingCall(args=tuple(args), kwargs=dict(kwargs or {}), receiver=receiver)
        with self._lock:
            return self._controller.call(pending_call)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.invoke(args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return _BoundDebounced(self, instance)

    def cancel(self) -> None:
        with self._lock:
            self._controller.cancel()

    def flush(self) -> Any:
        with self._lock:
            return self._controller.flush()

    def pending(self) -> bool:
        with self._lock:
            return self._controller.pending()

    def __repr__(self) -> str:
        name = getattr(self, "__qualname__", type(self).__name__)
        return f"<{type(self).__name__} {name} {self._config!r}>"


class _BoundDebounced:
    """A ``Debounced`` accessed through an instance; forwards it as receiver."""

    def __init__(self, owner: Debounced, receiver: Any) -> None:
        self._owner = owner
        self._receiver = receiver

    @property
    def config(self) -> DebounceConfig:
        return self._owner.config

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._owner.invoke(args, kwargs, receiver=self._receiver)

    def invoke(
        self,
        args: Iterable[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._owner.invoke(args, kwargs, receiver=self._receiver)

    def cancel(self) -> None:
        self._owner.cancel()

    def flush(self) -> Any:
        return self._owner.flush()

    def pending(self) -> bool:
        return self._owner.pending()


def debounce(
    func: Callable[..., Any] | None = None,
    wait: float | None = None,
    *,
    leading: bool = False,
    trailing: bool = True,
    max_wait: float | None = None,
    clock: Clock | None = None,
    scheduler: Scheduler | None = None,
    frame_scheduler: Scheduler | None = None,
) -> Any:
    """Create a debounced wrapper of ``func``.

    ``func`` is invoked ``wait`` milliseconds after the last call, on the
    leading and/or trailing edge of the window. With ``max_wait``, an
    invocation is never deferred longer than ``max_wait`` while calls keep
    arriving. When ``wait`` is omitted and ``frame_scheduler`` is given,
    invocations are deferred to the next frame instead.

    Without ``func``, returns a decorator::

        @debounce(wait=250, max_wait=1000)
        def save(document): ...
    """

    options: dict[str, Any] = {
        "wait": wait,
        "leading": leading,
        "trailing": trailing,
        "max_wait": max_wait,
        "clock": clock,
        "scheduler": scheduler,
        "frame_scheduler": frame_scheduler,
    }
    if func is None:
        return functools.partial(debounce, **options)
    ensure_callable(func)
    config = DebounceConfig.from_options(
        wait,
        leading=leading,
        trailing=trailing,
        max_wait=max_wait,
        frame_sync_available=frame_scheduler is not None,
    )
    return Debounced(
        func,
        config,
        clock=clock,
        scheduler=scheduler,
        frame_scheduler=frame_scheduler,
    )


__all__ = [
    "Debounced",
    "debounce",
    "validate_debounce_config",
]
