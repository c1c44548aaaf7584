"""Protocols describing the seams between filters, formatters, and hosts."""

from __future__ import annotations

from .filter import LogFilterPort
from .time import ClockPort

__all__ = ["ClockPort", "LogFilterPort"]
