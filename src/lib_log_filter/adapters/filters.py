"""Trivial filters and the coercion helper accepting filter shorthands.

Contents
--------
* :class:`AllowAllFilter` / :class:`LogNothingFilter` – constant decisions.
* :class:`LevelThresholdFilter` – a single minimum level, sources ignored.
* :class:`FunctionLogFilter` – wraps ``fn(level, source) -> bool``.
* :func:`default_log_filter` – normalise ``bool``/callable/filter inputs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from lib_log_filter.application.ports.filter import LogFilterPort
from lib_log_filter.domain.levels import LogLevel
from lib_log_filter.domain.messages import LogMessage

FilterFunction = Callable[[LogLevel, Optional[str]], bool]


class AllowAllFilter(LogFilterPort):
    """Filter that never suppresses anything."""

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        return True

    def should_log_message(self, message: LogMessage) -> bool:
        return True


class LogNothingFilter(LogFilterPort):
    """Filter that suppresses every message."""

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        return False

    def should_log_message(self, message: LogMessage) -> bool:
        return False


class LevelThresholdFilter(LogFilterPort):
    """Emit messages at or above ``level`` regardless of their source."""

    def __init__(self, level: LogLevel | str | int) -> None:
        self._level = LogLevel.get(level)

    @property
    def level(self) -> LogLevel:
        return self._level

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        return level >= self._level

    def should_log_message(self, message: LogMessage) -> bool:
        return self.should_log(message.level, message.source)


class FunctionLogFilter(LogFilterPort):
    """Adapt a plain predicate to :class:`LogFilterPort`."""

    def __init__(self, fn: FilterFunction) -> None:
        self._fn = fn

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        return bool(self._fn(level, source))

    def should_log_message(self, message: LogMessage) -> bool:
        return self.should_log(message.level, message.source)


ALLOW_ALL = AllowAllFilter()
LOG_NOTHING = LogNothingFilter()


def default_log_filter(filter: FilterFunction | LogFilterPort | bool) -> LogFilterPort:
    """Return a :class:`LogFilterPort` for the common shorthand inputs.

    ``True`` logs everything, ``False`` logs nothing, a filter object is
    returned unchanged, and any other callable is wrapped.

    Examples
    --------
    >>> default_log_filter(True).should_log(LogLevel.DEBUG)
    True
    >>> default_log_filter(lambda level, source: source == "db").should_log(LogLevel.INFO, "api")
    False
    """

    if filter is True:
        return ALLOW_ALL
    if filter is False:
        return LOG_NOTHING
    if isinstance(filter, LogFilterPort):
        return filter
    if callable(filter):
        return FunctionLogFilter(filter)
    raise TypeError(f"Unsupported filter: {filter!r}")


__all__ = [
    "ALLOW_ALL",
    "AllowAllFilter",
    "FunctionLogFilter",
    "LOG_NOTHING",
    "LevelThresholdFilter",
    "LogNothingFilter",
    "default_log_filter",
]
