"""Public package exports for pydebounce."""

from .config import DebounceConfig
from .core.async_scheduler import AsyncioScheduler
from .core.clock import monotonic_ms
from .core.errors import ConfigurationError, DebounceError
from .core.frame_scheduler import FrameScheduler
from .core.scheduler import TimerScheduler
from .debounce import Debounced, debounce
from .throttle import throttle

__all__ = [
    "debounce",
    "throttle",
    "Debounced",
    "DebounceConfig",
    "ConfigurationError",
    "DebounceError",
    "TimerScheduler",
    "AsyncioScheduler",
    "FrameScheduler",
    "monotonic_ms",
]
