"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from berlin_clock.config import runtime


class RecordingLogSink:
    """Log sink that keeps every message for later assertions."""

    def __init__(self) -> None:
        self.debug_messages: list[str] = []
        self.error_messages: list[str] = []

    def debug(self, message: str) -> None:
        self.debug_messages.append(message)

    def error(self, message: str) -> None:
        self.error_messages.append(message)


@pytest.fixture
def recording_sink() -> RecordingLogSink:
    return RecordingLogSink()


@pytest.fixture(autouse=True)
def isolated_runtime_defaults(monkeypatch):
    """Keep developer .env files out of the tests."""
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None
