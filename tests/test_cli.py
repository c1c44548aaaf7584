"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from lib_log_filter import __init__conf__, summary_info
from lib_log_filter import cli as cli_mod


def run_cli(args: list[str] | None = None, env: dict[str, str] | None = None) -> tuple[int, str]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], env=env, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_flag() -> None:
    exit_code, stdout = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == __init__conf__.version


def test_check_reports_longest_prefix_decisions() -> None:
    exit_code, stdout = run_cli(
        [
            "check",
            "warning",
            "a/b/c",
            "a/c",
            "x",
            "--default",
            "info",
            "--prefix",
            "a=warning",
            "--prefix",
            "a/b=error",
            "--no-color",
        ]
    )

    assert exit_code == 0
    assert stdout.splitlines() == [
        "suppress warning a/b/c (threshold error)",
        "emit     warning a/c (threshold warning)",
        "emit     warning x (threshold info)",
    ]


def test_check_without_source_uses_default() -> None:
    exit_code, stdout = run_cli(["check", "debug", "--default", "info", "--prefix", "=debug", "--no-color"])

    assert exit_code == 0
    assert stdout.strip() == "suppress debug <default> (threshold info)"


def test_check_reads_environment_configuration() -> None:
    env = {"LOG_FILTER_PREFIXES": "svc.db=error", "LOG_FILTER_SEPARATOR": ".", "LOG_FILTER_DEFAULT_LEVEL": "debug"}
    exit_code, stdout = run_cli(["check", "warning", "svc.db.pool", "svc.api", "--no-color"], env=env)

    assert exit_code == 0
    assert stdout.splitlines() == [
        "suppress warning svc.db.pool (threshold error)",
        "emit     warning svc.api (threshold debug)",
    ]


def test_check_rejects_empty_separator() -> None:
    exit_code, stdout = run_cli(["check", "info", "a", "--separator", ""])

    assert exit_code == 2
    assert "separator must not be empty" in stdout


@pytest.mark.parametrize(
    "args",
    [
        ["check", "loud", "a"],
        ["check", "info", "a", "--default", "loud"],
        ["check", "info", "a", "--prefix", "a"],
    ],
)
def test_check_reports_usage_errors(args: list[str]) -> None:
    exit_code, _ = run_cli(args)

    assert exit_code == 2


def test_render_uses_template_and_message_fields() -> None:
    exit_code, stdout = run_cli(
        [
            "render",
            "disk full",
            "--level",
            "error",
            "--source",
            "app/disk",
            "--code",
            "D1",
            "--error",
            "OSError: no space",
            "--template",
            "[{level:name}] {source} {code}: {message} ({error})",
            "--no-color",
        ]
    )

    assert exit_code == 0
    assert stdout.strip() == "[Error] app/disk D1: disk full (OSError: no space)"


def test_render_reads_template_from_environment() -> None:
    exit_code, stdout = run_cli(["render", "hi", "--no-color"], env={"LOG_FILTER_FORMAT": "{level:symbol} {message}"})

    assert exit_code == 0
    assert stdout.strip() == "INFO hi"


@pytest.mark.parametrize("template", ["{hostname}", "{date:rfc}"])
def test_render_rejects_bad_templates(template: str) -> None:
    exit_code, stdout = run_cli(["render", "hi", "--template", template])

    assert exit_code == 2
    assert "--template" in stdout


def test_main_returns_exit_code_for_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["check", "loud"]) == 2
    assert cli_mod.main(["info"]) == 0
    assert "Info for lib_log_filter" in capsys.readouterr().out
