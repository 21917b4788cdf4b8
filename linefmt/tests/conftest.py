"""Shared fixtures for the formatter test suite.

Pins the runtime identifiers so plain-mode lines can be compared byte for
byte, and provides small factories for entries and formatters.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

import pytest

from linefmt.base.entry import LogEntry
from linefmt.base.levels import Level
from linefmt.config.formatter_config import FormatterConfig
from linefmt.text_formatter import TextFormatter

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def pinned_runtime_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make process id, thread id and OS code deterministic."""

    monkeypatch.setattr("linefmt.text_formatter.get_process_id", lambda: 123)
    monkeypatch.setattr("linefmt.text_formatter.get_current_thread_id", lambda: 456)
    monkeypatch.setattr("linefmt.text_formatter.detect_os", lambda: "L")


@pytest.fixture()
def make_entry() -> Callable[..., LogEntry]:
    def _make(
        message: str = "hello",
        level: Level = Level.INFO,
        fields: Optional[Mapping[str, Any]] = None,
        time: datetime = FIXED_TIME,
        buffer: Optional[bytearray] = None,
    ) -> LogEntry:
        return LogEntry(time=time, level=level, message=message, fields=fields or {}, buffer=buffer)

    return _make


@pytest.fixture()
def make_formatter() -> Callable[..., TextFormatter]:
    """Build a formatter whose terminal probe always reports ``is_tty``."""

    from linefmt.base.terminal import TerminalProbe

    def _make(is_tty: bool = False, base_timestamp: datetime = FIXED_TIME, **settings: Any) -> TextFormatter:
        return TextFormatter(
            FormatterConfig(**settings),
            terminal_probe=TerminalProbe(lambda _stream: is_tty),
            base_timestamp=base_timestamp,
        )

    return _make
