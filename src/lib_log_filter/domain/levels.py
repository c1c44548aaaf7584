"""Log level abstraction providing ordering and presentation metadata.

Purpose
-------
Offer a domain-specific representation of log severities that augments the
stdlib levels with display keys, symbols, icons, and the ``ALL``/``NONE``
sentinels used as filter thresholds.

Contents
--------
* :class:`LogLevel` enum with lookup, ordering, and conversion helpers.
* ``_LABEL_TABLE``, ``_SYMBOL_TABLE``, ``_ICON_TABLE`` presentation constants.

System Role
-----------
Shared by the prefix filter (threshold comparisons) and the formatter (level
placeholders). Every public API that accepts a level funnels through
:meth:`LogLevel.get`.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated, totally ordered logging levels.

    ``ALL`` and ``NONE`` are sentinel extremes: a threshold of ``ALL`` lets
    every real level through and a threshold of ``NONE`` suppresses them all.
    """

    ALL = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    NONE = 100

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def key(self) -> str:
        """Return the lowercase lookup key (``"warning"``)."""

        return self.name.lower()

    @property
    def severity(self) -> str:
        """Alias of :attr:`key` for structured payloads."""

        return self.key

    @property
    def label(self) -> str:
        """Return the human-readable display name (``"Warning"``)."""

        return _LABEL_TABLE[self]

    @property
    def symbol(self) -> str:
        """Return the short severity code (``"WARN"``)."""

        return _SYMBOL_TABLE[self]

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level.

        Sentinels map to their rank: ``ALL`` equals ``logging.NOTSET`` and
        ``NONE`` sits above ``logging.CRITICAL``.
        """

        if self in (LogLevel.ALL, LogLevel.NONE):
            return self.value
        return getattr(logging, self.name)

    @classmethod
    def get(cls, key_or_level: "LogLevel | str | int") -> "LogLevel":
        """Resolve a level, key, or numeric rank into a :class:`LogLevel`.

        Examples
        --------
        >>> LogLevel.get("warn") is LogLevel.WARNING
        True
        >>> LogLevel.get(40) is LogLevel.ERROR
        True
        >>> LogLevel.get(LogLevel.ALL) is LogLevel.ALL
        True
        """

        if isinstance(key_or_level, LogLevel):
            return key_or_level
        if isinstance(key_or_level, bool):
            raise ValueError(f"Unknown log level: {key_or_level!r}")
        if isinstance(key_or_level, int):
            return cls.from_numeric(key_or_level)
        if isinstance(key_or_level, str):
            return cls.from_name(key_or_level)
        raise ValueError(f"Unknown log level: {key_or_level!r}")

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        return cls.from_numeric(level)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

_LABEL_TABLE = {
    LogLevel.ALL: "All",
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARNING: "Warning",
    LogLevel.ERROR: "Error",
    LogLevel.CRITICAL: "Critical",
    LogLevel.NONE: "None",
}

_SYMBOL_TABLE = {
    LogLevel.ALL: "ALL",
    LogLevel.DEBUG: "DEBG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERRO",
    LogLevel.CRITICAL: "CRIT",
    LogLevel.NONE: "NONE",
}

_ICON_TABLE = {
    LogLevel.ALL: "*",
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
    LogLevel.NONE: "∅",
}
# Console glyphs displayed next to rendered lines.


__all__ = ["LogLevel"]
