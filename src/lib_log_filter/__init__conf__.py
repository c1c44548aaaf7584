"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_filter"
title = "Hierarchical source-prefix log filtering and message formatting"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_filter"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_filter"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner through ``writer`` (defaults to :func:`print`).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_filter:
    ...
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    width = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(width)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is print:
        print(text, end="")
    else:
        writer(text)
