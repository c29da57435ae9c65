"""Shared test fixtures for logtribe."""

from __future__ import annotations

import io
from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from logtribe.sinks.stream import StreamLogger

FIXED_TIME = datetime(2024, 5, 1, 12, 0, 0, 123456)


class FrozenDatetime(datetime):
    """``datetime`` whose ``now()`` always returns ``FIXED_TIME``."""

    @classmethod
    def now(cls, tz: Any = None) -> datetime:  # type: ignore[override]
        return FIXED_TIME


class RecordingLogger:
    """A leveled sink that records every call instead of writing."""

    def __init__(self, logdev: Any = None) -> None:
        self.level: Any = None
        self.progname: Any = None
        self.datetime_format: Any = None
        self.formatter: Any = None
        self.logdev = logdev
        self.added: list[tuple[Any, Any, Any, Any]] = []
        self.written: list[Any] = []
        self.closed = False

    def add(self, severity, message=None, progname=None, block=None):
        self.added.append((severity, message, progname, block))
        return True

    def write(self, msg):
        self.written.append(msg)

    def close(self):
        self.closed = True


class RecordingPoster:
    """A tag-poster sink: only ``post`` exists."""

    def __init__(self) -> None:
        self.posts: list[tuple[str, dict[str, Any]]] = []

    def post(self, tag, payload):
        self.posts.append((tag, payload))
        return True


class FakeDevice:
    """Log device with optional flush/stat capabilities."""

    def __init__(self, flushable: bool = True, statable: bool = False) -> None:
        self.flushes = 0
        if flushable:
            self.flush = self._flush
        if statable:
            self.stat = lambda: None

    def _flush(self) -> None:
        self.flushes += 1


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin ``datetime.now()`` inside the multiplexer to ``FIXED_TIME``."""
    monkeypatch.setattr("logtribe.multiplexer.datetime", FrozenDatetime)
    return FIXED_TIME


@pytest.fixture
def make_stream_logger() -> Callable[..., tuple[StreamLogger, io.StringIO]]:
    """Factory fixture: a StreamLogger over a fresh StringIO."""

    def _factory(**kwargs: Any) -> tuple[StreamLogger, io.StringIO]:
        buffer = io.StringIO()
        return StreamLogger(buffer, **kwargs), buffer

    return _factory


# ---------------------------------------------------------------------------
# Fake sink factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_recording_logger() -> Callable[..., RecordingLogger]:
    """Factory fixture: a leveled sink that records calls."""
    return RecordingLogger


@pytest.fixture
def make_poster() -> Callable[..., RecordingPoster]:
    """Factory fixture: a tag-poster sink that records posts."""
    return RecordingPoster


@pytest.fixture
def make_device() -> Callable[..., FakeDevice]:
    """Factory fixture: a log device with chosen flush/stat capabilities."""
    return FakeDevice
