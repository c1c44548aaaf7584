"""Environment and ``.env`` driven configuration for the source-prefix filter.

Purpose
-------
Let hosts and the CLI configure a :class:`SourcePrefixLogFilter` without code
changes, using ``LOG_FILTER_*`` environment variables optionally loaded from
the nearest ``.env`` file.

Contents
--------
* :class:`FilterSettings` – resolved configuration values.
* :func:`load_settings` / :func:`build_filter` – env merge and construction.
* :func:`parse_prefix_levels` – ``"a/b=warning,c=error"`` parser.
* :func:`enable_dotenv` / :func:`should_use_dotenv` – ``.env`` support.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from .adapters.formatting import FormatRegistry, LogFormat, compile_template
from .adapters.prefix_filter import SourcePrefixLogFilter
from .domain.levels import LogLevel

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_FILTER_USE_DOTENV"
DEFAULT_LEVEL_ENV_VAR = "LOG_FILTER_DEFAULT_LEVEL"
PREFIXES_ENV_VAR = "LOG_FILTER_PREFIXES"
SEPARATOR_ENV_VAR = "LOG_FILTER_SEPARATOR"
FORMAT_ENV_VAR = "LOG_FILTER_FORMAT"

DEFAULT_TEMPLATE = "{datetime} {level:symbol} {message}"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_dotenv_path: Path | None = None
_dotenv_loaded = False


@dataclass(slots=True, frozen=True)
class FilterSettings:
    """Configuration for a source-prefix filter and its line template."""

    default_level: LogLevel = LogLevel.INFO
    prefix_levels: Mapping[str, LogLevel] = field(default_factory=dict)
    separator: str = "/"
    template: str = DEFAULT_TEMPLATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_level", LogLevel.get(self.default_level))
        levels = {prefix: LogLevel.get(level) for prefix, level in self.prefix_levels.items()}
        object.__setattr__(self, "prefix_levels", levels)


def parse_prefix_levels(raw: str | None) -> dict[str, LogLevel]:
    """Parse ``"prefix=level"`` pairs separated by commas.

    Examples
    --------
    >>> parse_prefix_levels("app/db=warning, app=info")
    {'app/db': <LogLevel.WARNING: 30>, 'app': <LogLevel.INFO: 20>}
    >>> parse_prefix_levels("=error")
    {'': <LogLevel.ERROR: 40>}
    """

    if not raw or not raw.strip():
        return {}
    result: dict[str, LogLevel] = {}
    for chunk in raw.split(","):
        entry = chunk.strip()
        if not entry:
            continue
        prefix, sep, level = entry.rpartition("=")
        if not sep or not level.strip():
            raise ValueError(f"Invalid prefix level entry {entry!r}; expected PREFIX=LEVEL")
        result[prefix.strip()] = LogLevel.from_name(level)
    return result


def load_settings(
    *,
    default_level: LogLevel | str | int = LogLevel.INFO,
    prefix_levels: Mapping[str, LogLevel | str | int] | None = None,
    separator: str = "/",
    template: str | None = None,
) -> FilterSettings:
    """Merge ``LOG_FILTER_*`` environment variables over keyword defaults.

    Environment prefixes are layered on top of ``prefix_levels`` so a single
    override can be added without restating the whole map.
    """

    default_level = os.getenv(DEFAULT_LEVEL_ENV_VAR) or default_level
    merged = dict(prefix_levels or {})
    merged.update(parse_prefix_levels(os.getenv(PREFIXES_ENV_VAR)))
    separator = os.getenv(SEPARATOR_ENV_VAR, separator)
    template = os.getenv(FORMAT_ENV_VAR) or template
    settings = FilterSettings(
        default_level=LogLevel.get(default_level),
        prefix_levels=merged,
        separator=separator,
        template=template or DEFAULT_TEMPLATE,
    )
    logger.debug(
        "Loaded filter settings: default=%s prefixes=%s separator=%r",
        settings.default_level.key,
        sorted(settings.prefix_levels),
        settings.separator,
    )
    return settings


def build_filter(settings: FilterSettings) -> SourcePrefixLogFilter:
    """Construct the filter described by ``settings``."""

    return SourcePrefixLogFilter(settings.default_level, settings.prefix_levels, settings.separator)


def build_format(settings: FilterSettings, registry: FormatRegistry | None = None) -> LogFormat:
    """Compile the line template described by ``settings``."""

    return compile_template(settings.template, registry)


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise the ``LOG_FILTER_USE_DOTENV`` value is
    interpreted as a boolean toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY or not normalized:
        return False
    raise ValueError(f"{DOTENV_ENV_VAR} must be a boolean flag, got {env_value!r}")


def _find_dotenv(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the loaded file, or ``None`` when no file was found. Repeated calls
    reuse the first result.
    """

    global _dotenv_path, _dotenv_loaded
    if _dotenv_loaded:
        return _dotenv_path
    start = (search_from or Path.cwd()).resolve()
    path = _find_dotenv(start)
    if path is not None:
        load_dotenv(path, override=False)
        logger.debug("Loaded environment from %s", path)
    _dotenv_path = path
    _dotenv_loaded = True
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_path, _dotenv_loaded
    _dotenv_path = None
    _dotenv_loaded = False


__all__ = [
    "DEFAULT_LEVEL_ENV_VAR",
    "DEFAULT_TEMPLATE",
    "DOTENV_ENV_VAR",
    "FORMAT_ENV_VAR",
    "FilterSettings",
    "PREFIXES_ENV_VAR",
    "SEPARATOR_ENV_VAR",
    "build_filter",
    "build_format",
    "enable_dotenv",
    "load_settings",
    "parse_prefix_levels",
    "should_use_dotenv",
]
