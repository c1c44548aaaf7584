"""Composable message formatting built from literal and placeholder segments.

Why
---
Hosts describe a line layout once (``"[", "level", "] ", "message"``) and get
back a single callable rendering :class:`LogMessage` instances. Placeholder
names resolve through an explicit :class:`FormatRegistry` so no process-wide
state is involved and tests can inject a fixed clock.

Contents
--------
* :data:`LogFormat` – ``Callable[[LogMessage], str]``.
* Factories: :func:`date_format`, :func:`time_format`,
  :func:`datetime_format`, :func:`level_format`, :func:`source_format`,
  :func:`source_template`, :func:`code_format`, :func:`code_template`,
  :func:`error_format`, :func:`literal`, plus :func:`details` and
  :func:`message_text`.
* :class:`FormatRegistry` – named placeholder factories.
* :func:`log_format` / :func:`compile_template` – composition entry points.

System Role
-----------
Presentation helper independent of the filter; both only share the
:class:`LogMessage` shape.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from lib_log_filter.application.ports.time import ClockPort
from lib_log_filter.domain.errors import ArgumentError
from lib_log_filter.domain.messages import LogMessage

LogFormat = Callable[[LogMessage], str]
Placeholder = str | LogFormat
FormatFactory = Callable[..., LogFormat]


class UnknownPlaceholderError(KeyError):
    """Raised when a placeholder name is not present in the registry."""


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


_SYSTEM_CLOCK = SystemClock()


def _utc_now(clock: ClockPort) -> datetime:
    return clock.now().astimezone(timezone.utc)


def _millis(moment: datetime) -> str:
    return f"{moment.microsecond // 1000:03d}"


def _epoch_millis(moment: datetime) -> str:
    return str(int(moment.timestamp()) * 1000 + moment.microsecond // 1000)


def _invalid(kind: str, value: str, allowed: Iterable[str]) -> ArgumentError:
    return ArgumentError(f"Unknown {kind} format {value!r}; expected one of: {', '.join(allowed)}")


def date_format(fmt: str = "iso", *, clock: ClockPort | None = None) -> LogFormat:
    """Render the current date.

    ``iso`` yields ``YYYY-MM-DD`` in UTC, ``locale`` the local ``%x`` form,
    and ``unix`` the epoch time in milliseconds.
    """

    active = clock or _SYSTEM_CLOCK
    if fmt == "iso":
        return lambda message: _utc_now(active).strftime("%Y-%m-%d")
    if fmt == "locale":
        return lambda message: active.now().astimezone().strftime("%x")
    if fmt == "unix":
        return lambda message: _epoch_millis(active.now())
    raise _invalid("date", fmt, ("iso", "locale", "unix"))


def time_format(fmt: str = "iso", *, clock: ClockPort | None = None) -> LogFormat:
    """Render the current time as ``HH:MM:SS.mmm`` (UTC) or locale ``%X``."""

    active = clock or _SYSTEM_CLOCK

    def _iso(message: LogMessage) -> str:
        now = _utc_now(active)
        return f"{now:%H:%M:%S}.{_millis(now)}"

    if fmt == "iso":
        return _iso
    if fmt == "locale":
        return lambda message: active.now().astimezone().strftime("%X")
    raise _invalid("time", fmt, ("iso", "locale"))


def datetime_format(fmt: str = "iso", *, clock: ClockPort | None = None) -> LogFormat:
    """Render the current timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` or locale ``%c``."""

    active = clock or _SYSTEM_CLOCK

    def _iso(message: LogMessage) -> str:
        now = _utc_now(active)
        return f"{now:%Y-%m-%dT%H:%M:%S}.{_millis(now)}Z"

    if fmt == "iso":
        return _iso
    if fmt == "locale":
        return lambda message: active.now().astimezone().strftime("%c")
    raise _invalid("datetime", fmt, ("iso", "locale"))


_LEVEL_FORMATS: Mapping[str, LogFormat] = {
    "key": lambda message: message.level.key,
    "name": lambda message: message.level.label,
    "symbol": lambda message: message.level.symbol,
    "icon": lambda message: message.level.icon,
}


def level_format(fmt: str = "key") -> LogFormat:
    """Render the message level by ``key``, display ``name``, ``symbol``, or ``icon``."""

    try:
        return _LEVEL_FORMATS[fmt]
    except KeyError:
        raise _invalid("level", fmt, _LEVEL_FORMATS) from None


def source_format(default: str = "") -> LogFormat:
    """Render the message source, or ``default`` when it has none."""

    return lambda message: default if message.source is None else message.source


def source_template(template: str, placeholder: str = "%", default: str = "") -> LogFormat:
    """Substitute the source for the first ``placeholder`` in ``template``.

    Examples
    --------
    >>> from lib_log_filter.domain import LogLevel
    >>> source_template("(%) ")(LogMessage(LogLevel.INFO, "x", source="db"))
    '(db) '
    """

    return lambda message: default if message.source is None else template.replace(placeholder, message.source, 1)


def code_format(default: str = "") -> LogFormat:
    """Render the message code, or ``default`` when it has none."""

    return lambda message: default if message.code is None else message.code


def code_template(template: str, placeholder: str = "%", default: str = "") -> LogFormat:
    """Substitute the code for the first ``placeholder`` in ``template``."""

    return lambda message: default if message.code is None else template.replace(placeholder, message.code, 1)


def _error_name(message: LogMessage) -> str:
    return "" if message.error is None else message.error.name


def _error_message(message: LogMessage) -> str:
    return "" if message.error is None else message.error.message


def _error_name_and_message(message: LogMessage) -> str:
    if message.error is None:
        return ""
    return f"{message.error.name}: {message.error.message}"


_ERROR_FORMATS: Mapping[str, LogFormat] = {
    "name": _error_name,
    "message": _error_message,
    "name-and-message": _error_name_and_message,
}


def error_format(fmt: str = "name-and-message") -> LogFormat:
    """Render the attached error; empty when the message carries none."""

    try:
        return _ERROR_FORMATS[fmt]
    except KeyError:
        raise _invalid("error", fmt, _ERROR_FORMATS) from None


def details(message: LogMessage) -> str:
    return str(message.details)


def message_text(message: LogMessage) -> str:
    return message.message


def literal(text: str) -> LogFormat:
    """Return a segment that always renders ``text``."""

    return lambda message: text


def _fixed(name: str, fmt: LogFormat) -> FormatFactory:
    def factory(option: str | None = None) -> LogFormat:
        if option is not None:
            raise ArgumentError(f"Placeholder {name!r} does not accept options (got {option!r})")
        return fmt

    return factory


class FormatRegistry:
    """Named placeholder factories consulted by :func:`log_format`.

    Each entry is a factory called with no arguments for the default variant
    or with a single option string (``"unix"`` for ``date``, a fallback text
    for ``source``) when a template requests one.

    Examples
    --------
    >>> registry = FormatRegistry.default()
    >>> "level" in registry
    True
    >>> registry.register("shout", lambda message: message.message.upper())
    >>> sorted(registry.names())[:3]
    ['code', 'date', 'datetime']
    """

    def __init__(self) -> None:
        self._factories: dict[str, FormatFactory] = {}

    @classmethod
    def default(cls, clock: ClockPort | None = None) -> "FormatRegistry":
        """Build a registry holding the well-known placeholders."""

        registry = cls()
        registry.register_factory("date", lambda fmt="iso": date_format(fmt, clock=clock))
        registry.register_factory("time", lambda fmt="iso": time_format(fmt, clock=clock))
        registry.register_factory("datetime", lambda fmt="iso": datetime_format(fmt, clock=clock))
        registry.register_factory("level", level_format)
        registry.register_factory("source", source_format)
        registry.register_factory("code", code_format)
        registry.register_factory("error", error_format)
        registry.register("details", details)
        registry.register("message", message_text)
        return registry

    def register(self, name: str, fmt: LogFormat) -> None:
        """Register a fixed rendering function under ``name``."""

        self._factories[name] = _fixed(name, fmt)

    def register_factory(self, name: str, factory: FormatFactory) -> None:
        """Register a factory accepting an optional variant string."""

        self._factories[name] = factory

    def resolve(self, name: str, option: str | None = None) -> LogFormat:
        """Return the rendering function for ``name`` and optional variant."""

        try:
            factory = self._factories[name]
        except KeyError:
            raise UnknownPlaceholderError(name) from None
        return factory() if option is None else factory(option)

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def _concatenate(segments: list[LogFormat]) -> LogFormat:
    def render(message: LogMessage) -> str:
        return "".join(segment(message) for segment in segments)

    return render


def _placeholder(value: Any, registry: FormatRegistry) -> LogFormat:
    if isinstance(value, str):
        return registry.resolve(value)
    if callable(value):
        return value
    raise TypeError(f"Placeholder must be a name or callable, got {value!r}")


def log_format(*parts: Placeholder, registry: FormatRegistry | None = None) -> LogFormat:
    """Compile alternating literals and placeholders into one :data:`LogFormat`.

    Even positions are literal strings, odd positions placeholder names or
    callables. Empty literals are dropped; segments render in order.

    Examples
    --------
    >>> from lib_log_filter.domain import LogLevel
    >>> fmt = log_format("[", "level", "] ", "message")
    >>> fmt(LogMessage(LogLevel.ERROR, "disk full"))
    '[error] disk full'
    """

    active = registry if registry is not None else FormatRegistry.default()
    segments: list[LogFormat] = []
    for index, part in enumerate(parts):
        if index % 2:
            segments.append(_placeholder(part, active))
            continue
        if not isinstance(part, str):
            raise TypeError(f"Literal segment at position {index} must be a string, got {part!r}")
        if part:
            segments.append(literal(part))
    return _concatenate(segments)


def compile_template(template: str, registry: FormatRegistry | None = None) -> LogFormat:
    """Compile a ``str.format`` style template such as ``"{time} {level:symbol} {message}"``.

    The format spec after the colon selects the placeholder variant. Literal
    braces are written ``{{`` and ``}}``.

    Examples
    --------
    >>> from lib_log_filter.domain import LogLevel
    >>> compile_template("{level:symbol} {source:-} {message}")(LogMessage(LogLevel.WARNING, "slow"))
    'WARN - slow'
    """

    active = registry if registry is not None else FormatRegistry.default()
    segments: list[LogFormat] = []
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        raise ArgumentError(f"Invalid template {template!r}: {exc}") from exc
    for literal_text, field_name, format_spec, conversion in parsed:
        if literal_text:
            segments.append(literal(literal_text))
        if field_name is None:
            continue
        if conversion:
            raise ArgumentError(f"Conversions are not supported in templates (field {field_name!r})")
        segments.append(active.resolve(field_name, format_spec or None))
    return _concatenate(segments)


__all__ = [
    "FormatRegistry",
    "LogFormat",
    "SystemClock",
    "UnknownPlaceholderError",
    "code_format",
    "code_template",
    "compile_template",
    "date_format",
    "datetime_format",
    "details",
    "error_format",
    "level_format",
    "literal",
    "log_format",
    "message_text",
    "source_format",
    "source_template",
]
