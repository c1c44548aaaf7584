"""Exception types signalling caller misuse."""

from __future__ import annotations


class ArgumentError(ValueError):
    """Raised for static configuration mistakes such as an empty separator.

    Subclasses :class:`ValueError` so setup code that already guards against
    bad values keeps working.
    """


__all__ = ["ArgumentError"]
