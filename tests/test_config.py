from __future__ import annotations

import pytest

from lib_log_filter import config as log_config
from lib_log_filter.domain.errors import ArgumentError
from lib_log_filter.domain.levels import LogLevel
from lib_log_filter.domain.messages import LogMessage


def test_parse_prefix_levels_handles_whitespace_and_empty_prefix() -> None:
    parsed = log_config.parse_prefix_levels(" app = warning ,, =error,a=b=debug")
    assert parsed == {"app": LogLevel.WARNING, "": LogLevel.ERROR, "a=b": LogLevel.DEBUG}


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_prefix_levels_blank_input(raw: str | None) -> None:
    assert log_config.parse_prefix_levels(raw) == {}


@pytest.mark.parametrize("raw", ["app", "app=", "app=loud"])
def test_parse_prefix_levels_rejects_malformed_entries(raw: str) -> None:
    with pytest.raises(ValueError):
        log_config.parse_prefix_levels(raw)


def test_load_settings_uses_keyword_defaults() -> None:
    settings = log_config.load_settings(default_level="warning", prefix_levels={"a": "error"}, separator=".")
    assert settings.default_level is LogLevel.WARNING
    assert settings.prefix_levels == {"a": LogLevel.ERROR}
    assert settings.separator == "."
    assert settings.template == log_config.DEFAULT_TEMPLATE


def test_environment_overrides_keywords(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.DEFAULT_LEVEL_ENV_VAR, "error")
    monkeypatch.setenv(log_config.PREFIXES_ENV_VAR, "a=debug,b.c=critical")
    monkeypatch.setenv(log_config.SEPARATOR_ENV_VAR, ".")
    monkeypatch.setenv(log_config.FORMAT_ENV_VAR, "{level}|{message}")

    settings = log_config.load_settings(prefix_levels={"a": "warning", "z": "info"})

    assert settings.default_level is LogLevel.ERROR
    assert settings.prefix_levels == {"a": LogLevel.DEBUG, "z": LogLevel.INFO, "b.c": LogLevel.CRITICAL}
    assert settings.separator == "."
    assert log_config.build_format(settings)(LogMessage(LogLevel.INFO, "hi")) == "info|hi"


def test_build_filter_reflects_settings() -> None:
    settings = log_config.FilterSettings(default_level="error", prefix_levels={"db": "debug"})  # type: ignore[arg-type]
    flt = log_config.build_filter(settings)
    assert flt.should_log(LogLevel.DEBUG, "db/pool") is True
    assert flt.should_log(LogLevel.WARNING, "api") is False


def test_empty_separator_from_environment_fails_at_build(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.SEPARATOR_ENV_VAR, "")
    with pytest.raises(ArgumentError):
        log_config.build_filter(log_config.load_settings())


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "0", False),
        (None, "", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_should_use_dotenv_rejects_garbage() -> None:
    with pytest.raises(ValueError, match=log_config.DOTENV_ENV_VAR):
        log_config.should_use_dotenv(env_value="maybe")
