"""Domain entities and value objects shared by the filter and formatter."""

from __future__ import annotations

from .errors import ArgumentError
from .levels import LogLevel
from .messages import ErrorInfo, LogMessage

__all__ = [
    "ArgumentError",
    "ErrorInfo",
    "LogLevel",
    "LogMessage",
]
