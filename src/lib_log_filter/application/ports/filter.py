"""Port for filters deciding whether a log message is emitted."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_filter.domain.levels import LogLevel
from lib_log_filter.domain.messages import LogMessage


@runtime_checkable
class LogFilterPort(Protocol):
    """Decide whether a message at ``level`` from ``source`` may be emitted."""

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        """Return ``True`` when a message with these attributes passes."""

    def should_log_message(self, message: LogMessage) -> bool:
        """Return ``True`` when ``message`` passes the filter."""


__all__ = ["LogFilterPort"]
