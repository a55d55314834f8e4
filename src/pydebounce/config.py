"""Debounce configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def coerce_duration(value: object) -> float:
    """Coerce a timing option to a non-negative number of milliseconds.

    Malformed values (``None``, non-numeric, NaN, negative) become ``0.0``.
    """

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return number


@dataclass(slots=True, frozen=True)
class DebounceConfig:
    """Immutable timing policy of one debounced operation (milliseconds)."""

    wait: float = 0.0
    leading: bool = False
    trailing: bool = True
    max_wait: float | None = None
    use_frame_sync: bool = False

    @classmethod
    def from_options(
        cls,
        wait: object = None,
        *,
        leading: object = False,
        trailing: object = True,
        max_wait: object = None,
        frame_sync_available: bool = False,
    ) -> "DebounceConfig":
        use_frame_sync = wait is None and frame_sync_available
        resolved_wait = coerce_duration(wait)
        resolved_max_wait = None
        if max_wait is not None:
            resolved_max_wait = max(coerce_duration(max_wait), resolved_wait)
        return cls(
            wait=resolved_wait,
            leading=bool(leading),
            trailing=bool(trailing),
            max_wait=resolved_max_wait,
            use_frame_sync=use_frame_sync,
        )

    @property
    def maxing(self) -> bool:
        return self.max_wait is not None

    def throttled(self) -> "DebounceConfig":
        """Return the rate-limiting preset of this config (``max_wait == wait``)."""

        return replace(self, max_wait=self.wait)

    def validate(self) -> None:
        for field_name in ("leading", "trailing", "use_frame_sync"):
            if not isinstance(getattr(self, field_name), bool):
                raise ValueError(f"{field_name} must be bool")
        for field_name in ("wait", "max_wait"):
            value = getattr(self, field_name)
            if value is None and field_name == "max_wait":
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{field_name} must be a number")
        if self.wait < 0:
            raise ValueError("wait must be >= 0")
        if self.max_wait is not None:
            if self.max_wait < 0:
                raise ValueError("max_wait must be >= 0")
            if self.max_wait < self.wait:
                raise ValueError("max_wait must be >= wait")


__all__ = [
    "DebounceConfig",
    "coerce_duration",
]
