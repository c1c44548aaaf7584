"""Concrete filter and formatter implementations."""

from __future__ import annotations

from .filters import (
    ALLOW_ALL,
    LOG_NOTHING,
    AllowAllFilter,
    FunctionLogFilter,
    LevelThresholdFilter,
    LogNothingFilter,
    default_log_filter,
)
from .formatting import (
    FormatRegistry,
    LogFormat,
    SystemClock,
    UnknownPlaceholderError,
    compile_template,
    log_format,
)
from .prefix_filter import SourcePrefixLogFilter

__all__ = [
    "ALLOW_ALL",
    "AllowAllFilter",
    "FormatRegistry",
    "FunctionLogFilter",
    "LOG_NOTHING",
    "LevelThresholdFilter",
    "LogFormat",
    "LogNothingFilter",
    "SourcePrefixLogFilter",
    "SystemClock",
    "UnknownPlaceholderError",
    "compile_template",
    "default_log_filter",
    "log_format",
]
