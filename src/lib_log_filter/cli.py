"""Click command line for inspecting filter decisions and rendered lines.

Contents
--------
* :func:`cli` – command group (``info``, ``check``, ``render``).
* :func:`main` – test-friendly runner returning an exit code.

Configuration falls back to the ``LOG_FILTER_*`` environment variables (see
:mod:`lib_log_filter.config`) whenever an option is omitted.
"""

from __future__ import annotations

import os
from typing import Mapping, Sequence

import click
from rich.console import Console
from rich.text import Text

from . import __init__conf__
from . import config as config_module
from .adapters.prefix_filter import SourcePrefixLogFilter
from .domain.errors import ArgumentError
from .domain.levels import LogLevel
from .domain.messages import ErrorInfo, LogMessage

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}


def _console(no_color: bool) -> Console:
    if no_color:
        return Console(color_system=None, no_color=True, highlight=False, soft_wrap=True)
    return Console(highlight=False, soft_wrap=True)


def _level_type(value: str) -> LogLevel:
    try:
        return LogLevel.get(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _settings_from_options(
    default_level: str | None,
    prefixes: Sequence[str],
    separator: str | None,
    template: str | None = None,
) -> config_module.FilterSettings:
    base = config_module.load_settings()
    prefix_levels = dict(base.prefix_levels)
    for entry in prefixes:
        prefix_levels.update(config_module.parse_prefix_levels(entry))
    return config_module.FilterSettings(
        default_level=_level_type(default_level) if default_level else base.default_level,
        prefix_levels=prefix_levels,
        separator=base.separator if separator is None else separator,
        template=template or base.template,
    )


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(version)s",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Inspect source-prefix filter decisions and rendered log lines."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    try:
        wanted = config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR))
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if wanted:
        config_module.enable_dotenv()
    if ctx.invoked_subcommand is None:
        from . import summary_info

        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print the package metadata banner."""

    from . import summary_info

    click.echo(summary_info(), nl=False)


@cli.command("check")
@click.argument("level")
@click.argument("sources", nargs=-1)
@click.option("--default", "default_level", metavar="LEVEL", help="Default threshold (env: LOG_FILTER_DEFAULT_LEVEL).")
@click.option("--prefix", "prefixes", multiple=True, metavar="PREFIX=LEVEL", help="Per-prefix threshold; repeatable.")
@click.option("--separator", default=None, help="Hierarchy separator (env: LOG_FILTER_SEPARATOR).")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
def check_command(
    level: str,
    sources: tuple[str, ...],
    default_level: str | None,
    prefixes: tuple[str, ...],
    separator: str | None,
    no_color: bool,
) -> None:
    """Report whether LEVEL messages from each SOURCE would be emitted.

    Without SOURCE arguments the decision for source-less messages is shown.
    """

    severity = _level_type(level)
    try:
        settings = _settings_from_options(default_level, prefixes, separator)
        log_filter = config_module.build_filter(settings)
    except ArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint="'--separator'") from exc
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    console = _console(no_color)
    for source in sources or (None,):
        console.print(_decision_line(log_filter, severity, source))


def _decision_line(log_filter: SourcePrefixLogFilter, level: LogLevel, source: str | None) -> Text:
    emitted = log_filter.should_log(level, source)
    threshold = log_filter.threshold_for(source)
    verdict = ("emit", "green") if emitted else ("suppress", "red")
    return Text.assemble(
        (f"{verdict[0]:<8}", verdict[1]),
        " ",
        (level.key, _STYLE_MAP.get(level, "")),
        " ",
        "<default>" if source is None else source,
        f" (threshold {threshold.key})",
    )


@cli.command("render")
@click.argument("message")
@click.option("--level", default="info", show_default=True, help="Message severity.")
@click.option("--source", default=None, help="Hierarchical source path.")
@click.option("--code", default=None, help="Message code.")
@click.option("--error", "error", default=None, metavar="NAME:MESSAGE", help="Attached error.")
@click.option("--template", default=None, help="Line template (env: LOG_FILTER_FORMAT).")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
def render_command(
    message: str,
    level: str,
    source: str | None,
    code: str | None,
    error: str | None,
    template: str | None,
    no_color: bool,
) -> None:
    """Render MESSAGE through the configured line template."""

    severity = _level_type(level)
    error_info = None
    if error is not None:
        name, _, text = error.partition(":")
        error_info = ErrorInfo(name=name.strip(), message=text.strip())
    record = LogMessage(level=severity, message=message, source=source, error=error_info, code=code)
    try:
        settings = _settings_from_options(None, (), None, template)
        fmt = config_module.build_format(settings)
    except (KeyError, ValueError) as exc:
        raise click.BadParameter(str(exc), param_hint="'--template'") from exc

    console = _console(no_color)
    console.print(Text(fmt(record), style=_STYLE_MAP.get(severity, "")))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
