"""Error types."""

from __future__ import annotations


class DebounceError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.cause = cause


class ConfigurationError(DebounceError, TypeError):
    """Invalid wrapped target or configuration, raised at construction."""


def ensure_callable(operation: object) -> None:
    if not callable(operation):
        raise ConfigurationError(
            "Expected a function",
            field="func",
            cause=f"{type(operation).__name__} is not callable",
        )


__all__ = [
    "DebounceError",
    "ConfigurationError",
    "ensure_callable",
]
