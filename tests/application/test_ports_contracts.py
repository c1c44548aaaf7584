from __future__ import annotations

from datetime import datetime, timezone

from lib_log_filter.adapters.formatting import SystemClock
from lib_log_filter.adapters.prefix_filter import SourcePrefixLogFilter
from lib_log_filter.application.ports.filter import LogFilterPort
from lib_log_filter.application.ports.time import ClockPort
from lib_log_filter.domain.levels import LogLevel
from lib_log_filter.domain.messages import LogMessage


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def record(self, name: str, **payload) -> None:
        self.calls.append((name, payload))


class _FakeFilter(LogFilterPort):
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        self.recorder.record("should_log", level=level, source=source)
        return True

    def should_log_message(self, message: LogMessage) -> bool:
        return self.should_log(message.level, message.source)


class _DuckFilter:
    def should_log(self, level: LogLevel, source: str | None = None) -> bool:
        return False

    def should_log_message(self, message: LogMessage) -> bool:
        return False


def test_filter_port_accepts_structural_implementations() -> None:
    recorder = _Recorder()
    fake = _FakeFilter(recorder)
    assert isinstance(fake, LogFilterPort)
    assert isinstance(_DuckFilter(), LogFilterPort)
    assert not isinstance(object(), LogFilterPort)

    fake.should_log_message(LogMessage(LogLevel.INFO, "m", source="a"))
    assert recorder.calls == [("should_log", {"level": LogLevel.INFO, "source": "a"})]


def test_prefix_filter_is_a_filter_port() -> None:
    assert isinstance(SourcePrefixLogFilter(LogLevel.INFO), LogFilterPort)


def test_system_clock_returns_aware_utc_timestamps() -> None:
    clock = SystemClock()
    assert isinstance(clock, ClockPort)
    now = clock.now()
    assert now.tzinfo is timezone.utc
    assert abs((datetime.now(timezone.utc) - now).total_seconds()) < 5
