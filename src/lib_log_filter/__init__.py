"""Public package surface for source-prefix log filtering and formatting.

Hosts typically build a :class:`SourcePrefixLogFilter` once at start-up,
compile a line layout with :func:`log_format` or :func:`compile_template`, and
consult both for every :class:`LogMessage` they produce.
"""

from __future__ import annotations

from .adapters import (
    ALLOW_ALL,
    LOG_NOTHING,
    FormatRegistry,
    LevelThresholdFilter,
    LogFormat,
    SourcePrefixLogFilter,
    UnknownPlaceholderError,
    compile_template,
    default_log_filter,
    log_format,
)
from .application.ports import ClockPort, LogFilterPort
from .domain import ArgumentError, ErrorInfo, LogLevel, LogMessage


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "ALLOW_ALL",
    "ArgumentError",
    "ClockPort",
    "ErrorInfo",
    "FormatRegistry",
    "LOG_NOTHING",
    "LevelThresholdFilter",
    "LogFilterPort",
    "LogFormat",
    "LogLevel",
    "LogMessage",
    "SourcePrefixLogFilter",
    "UnknownPlaceholderError",
    "compile_template",
    "default_log_filter",
    "log_format",
    "summary_info",
]
