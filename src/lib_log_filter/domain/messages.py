"""Domain record describing a structured log message.

Purpose
-------
Provide the immutable data shape consumed read-only by both the formatter
and the source-prefix filter.

Contents
--------
* :class:`ErrorInfo` – name/message pair captured from a failure.
* :class:`LogMessage` – frozen dataclass with serialisation helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .levels import LogLevel


@dataclass(slots=True, frozen=True)
class ErrorInfo:
    """Name and message of an error attached to a log message."""

    name: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        """Capture the exception class name and its string form.

        Examples
        --------
        >>> ErrorInfo.from_exception(KeyError("x")).name
        'KeyError'
        """

        return cls(name=type(exc).__name__, message=str(exc))

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "message": self.message}


@dataclass(slots=True, frozen=True)
class LogMessage:
    """Immutable log message produced at the logging call site.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the message.
    message:
        Message text supplied by the caller.
    source:
        Optional hierarchical origin such as ``"app/db/pool"``; segments are
        delimited by whatever separator the consuming filter uses.
    error:
        Optional :class:`ErrorInfo` describing an attached failure.
    code:
        Optional machine-readable message code.
    details:
        Optional structured payload rendered via ``str()`` by the formatter.
    """

    level: LogLevel
    message: str
    source: str | None = None
    error: ErrorInfo | None = None
    code: str | None = None
    details: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.get(self.level))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the message, omitting unset optional fields."""

        data: dict[str, Any] = {"level": self.level.key, "message": self.message}
        if self.source is not None:
            data["source"] = self.source
        if self.error is not None:
            data["error"] = self.error.to_dict()
        if self.code is not None:
            data["code"] = self.code
        if self.details is not None:
            data["details"] = self.details
        return data

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "LogMessage":
        """Reconstruct a message from :meth:`to_dict` output."""

        error = payload.get("error")
        return cls(
            level=LogLevel.get(payload["level"]),
            message=payload["message"],
            source=payload.get("source"),
            error=ErrorInfo(**error) if error is not None else None,
            code=payload.get("code"),
            details=payload.get("details"),
        )

    def replace(self, **changes: Any) -> "LogMessage":
        """Return a copied message with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["ErrorInfo", "LogMessage"]
