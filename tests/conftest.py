from __future__ import annotations

from datetime import datetime, timedelta
from io import StringIO

import pytest
from rich.console import Console

import lib_log_buffers
from lib_log_buffers.runtime import BufferedLogger

_LOG_ENV_VARS = (
    "LOG_SHOW_TIMESTAMP",
    "LOG_SHOW_CONSOLE",
    "LOG_INDENT_SIZE",
    "LOG_INDENT_CHAR",
    "LOG_COLORS",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_BUFFERS_USE_DOTENV",
)


class RecordingConsole:
    """Console port fake keeping every emitted ``(line, color)`` pair."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str | None]] = []

    def emit(self, line: str, *, color: str | None = None) -> None:
        self.lines.append((line, color))


class RecordingProgress:
    def __init__(self) -> None:
        self.calls: list[tuple[int, int, str, int]] = []

    def update(self, current: int, total: int, *, label: str = "", progress_id: int = 0) -> int:
        self.calls.append((current, total, label, progress_id))
        return 0 if total <= 0 else min(100, max(0, current * 100 // total))


class SteppingClock:
    """Clock returning ``start`` and advancing by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start or datetime(2025, 3, 9, 12, 0, 0)
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = value + self.step
        return value


class StaticIdentity:
    hostname = "build-host"
    user_name = "ci-user"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    lib_log_buffers.shutdown()
    yield
    lib_log_buffers.shutdown()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system="truecolor", force_terminal=True)


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def identity() -> StaticIdentity:
    return StaticIdentity()


@pytest.fixture
def logger(console: RecordingConsole, progress: RecordingProgress, clock: SteppingClock, identity: StaticIdentity) -> BufferedLogger:
    return BufferedLogger(console=console, progress=progress, clock=clock, identity=identity)
