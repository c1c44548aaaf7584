"""Hierarchical source-prefix filter with memoized lookups.

Purpose
-------
Decide per source path whether a message is emitted, using the threshold of
the most specific configured ancestor (longest-prefix match) and falling back
to a default threshold.

Contents
--------
* :class:`SourcePrefixLogFilter` – the filter implementation.

System Role
-----------
Decision layer a host logger consults before rendering a line. Configuration
is frozen at construction; a separate resolved-path cache memoizes lookups
per full source string.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping, MutableMapping
from types import MappingProxyType

from lib_log_filter.application.ports.filter import LogFilterPort
from lib_log_filter.domain.errors import ArgumentError
from lib_log_filter.domain.levels import LogLevel
from lib_log_filter.domain.messages import LogMessage

logger = logging.getLogger(__name__)

LevelLike = LogLevel | str | int


class SourcePrefixLogFilter(LogFilterPort):
    """Filter messages by the longest configured prefix of their source.

    Parameters
    ----------
    default_level:
        Threshold used when no prefix matches or the message has no source.
    prefix_levels:
        Mapping of literal source prefix to minimum level. The empty string
        is an ordinary prefix, reached only when truncation yields it.
    separator:
        Non-empty delimiter between hierarchy segments.
    cache:
        Optional mutable mapping receiving resolved thresholds keyed by full
        source path. Defaults to a plain ``dict``; pass a bounded mapping to
        cap memory when source cardinality is large.

    Raises
    ------
    ArgumentError
        If ``separator`` is empty.

    Examples
    --------
    >>> flt = SourcePrefixLogFilter("info", {"a": "warning", "a/b": "error"})
    >>> flt.should_log(LogLevel.WARNING, "a/b/c")
    False
    >>> flt.should_log(LogLevel.WARNING, "a/c")
    True
    >>> flt.should_log(LogLevel.INFO, "x")
    True
    """

    def __init__(
        self,
        default_level: LevelLike,
        prefix_levels: Mapping[str, LevelLike] | None = None,
        separator: str = "/",
        *,
        cache: MutableMapping[str, LogLevel] | None = None,
    ) -> None:
        if separator == "":
            raise ArgumentError("separator must not be empty")
        self._default_level = LogLevel.get(default_level)
        self._separator = separator
        thresholds = {prefix: LogLevel.get(level) for prefix, level in (prefix_levels or {}).items()}
        self._prefix_levels: Mapping[str, LogLevel] = MappingProxyType(thresholds)
        self._min_level = min([self._default_level, *thresholds.values()])
        self._resolved: MutableMapping[str, LogLevel] = cache if cache is not None else {}
        self._lock = threading.Lock()
        logger.debug(
            "Configured source prefix filter: default=%s prefixes=%d min=%s separator=%r",
            self._default_level.key,
            len(thresholds),
            self._min_level.key,
            separator,
        )

    @property
    def default_level(self) -> LogLevel:
        return self._default_level

    @property
    def min_level(self) -> LogLevel:
        """Lowest threshold across the default and every override."""
        return self._min_level

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def prefix_levels(self) -> Mapping[str, LogLevel]:
        """Read-only view of the configured overrides."""
        return self._prefix_levels

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        """Return ``True`` when ``level`` meets the threshold for ``source``."""

        if level < self._min_level:
            return False
        if source is None:
            return level >= self._default_level
        return level >= self._resolve(source)

    def should_log_message(self, message: LogMessage) -> bool:
        """Apply :meth:`should_log` to the level and source of ``message``."""

        return self.should_log(message.level, message.source)

    def threshold_for(self, source: str | None) -> LogLevel:
        """Return the threshold governing ``source`` without a level check."""

        if source is None:
            return self._default_level
        return self._resolve(source)

    def cached_paths(self) -> Iterator[str]:
        """Iterate over full source paths resolved so far."""

        with self._lock:
            paths = list(self._resolved)
        return iter(paths)

    def clear_cache(self) -> None:
        """Drop memoized resolutions; configured overrides are untouched."""

        with self._lock:
            self._resolved.clear()

    def _lookup(self, prefix: str) -> LogLevel | None:
        threshold = self._prefix_levels.get(prefix)
        if threshold is None:
            threshold = self._resolved.get(prefix)
        return threshold

    def _resolve(self, source: str) -> LogLevel:
        prefix = source
        while True:
            threshold = self._lookup(prefix)
            if threshold is not None:
                if prefix != source:
                    self._remember(source, threshold)
                return threshold
            index = prefix.rfind(self._separator)
            if index < 0:
                break
            prefix = prefix[:index]
        self._remember(source, self._default_level)
        return self._default_level

    def _remember(self, source: str, threshold: LogLevel) -> None:
        with self._lock:
            self._resolved[source] = threshold

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default_level={self._default_level.key!r}, "
            f"prefixes={len(self._prefix_levels)}, separator={self._separator!r})"
        )


__all__ = ["SourcePrefixLogFilter"]
