from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_filter.adapters.formatting import FormatRegistry
from lib_log_filter.adapters.prefix_filter import SourcePrefixLogFilter
from lib_log_filter.domain.levels import LogLevel


class FixedClock:
    """Clock returning a predetermined instant."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2025, 9, 23, 7, 5, 9, 42_000, tzinfo=timezone.utc))


@pytest.fixture
def registry(fixed_clock: FixedClock) -> FormatRegistry:
    return FormatRegistry.default(clock=fixed_clock)


@pytest.fixture
def layered_filter() -> SourcePrefixLogFilter:
    """Default INFO with ``a`` at WARNING and ``a/b`` at ERROR."""

    return SourcePrefixLogFilter(LogLevel.INFO, {"a": LogLevel.WARNING, "a/b": LogLevel.ERROR})


@pytest.fixture(autouse=True)
def _clear_filter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_FILTER_DEFAULT_LEVEL",
        "LOG_FILTER_PREFIXES",
        "LOG_FILTER_SEPARATOR",
        "LOG_FILTER_FORMAT",
        "LOG_FILTER_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
