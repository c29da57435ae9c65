"""Tests for capability resolution, the close policy, and the bundled sinks."""

from __future__ import annotations

import io
import json
import logging

from logtribe.models.capabilities import SinkCapabilities
from logtribe.multiplexer import Multiplexer
from logtribe.severity import Severity
from logtribe.sinks import (
    DeviceBackedSink,
    LeveledSink,
    TagPosterSink,
    get_device,
    resolve_capabilities,
    should_close,
)
from logtribe.sinks.jsonl import JsonlTagPoster
from logtribe.sinks.stdlib import StdlibLoggerSink


class _DeclaredDevice:
    def __init__(self, file_backed):
        self.file_backed = file_backed

    def stat(self):
        return None


class TestResolveCapabilities:
    def test_leveled_sink(self, make_recording_logger):
        caps = resolve_capabilities(make_recording_logger())
        assert caps.leveled and caps.raw_write and not caps.tag_poster
        assert caps.attributes == {"level", "progname", "datetime_format", "formatter"}
        assert caps.labels() == ["add", "write"]

    def test_tag_poster(self, make_poster):
        caps = resolve_capabilities(make_poster())
        assert caps == SinkCapabilities(tag_poster=True)
        assert caps.reachable

    def test_plain_object_is_unreachable(self):
        caps = resolve_capabilities(object())
        assert not caps.reachable
        assert caps.attributes == frozenset()

    def test_non_callable_members_are_not_capabilities(self):
        class _Lookalike:
            add = "not a method"
            post = None
            logdev = None

        caps = resolve_capabilities(_Lookalike())
        assert not caps.leveled
        assert not caps.tag_poster
        assert not caps.raw_write

    def test_get_device(self, make_recording_logger, make_device, make_poster):
        device = make_device()
        assert get_device(make_recording_logger(logdev=device)) is device
        assert get_device(make_poster()) is None

    def test_protocols(self, make_poster, make_recording_logger):
        assert isinstance(make_poster(), TagPosterSink)
        assert not isinstance(make_poster(), LeveledSink)
        assert isinstance(make_recording_logger(), DeviceBackedSink)


class TestClosePolicy:
    def test_declared_file_backed_wins_over_stat(self):
        assert should_close(_DeclaredDevice(True)) is True
        assert should_close(_DeclaredDevice(False)) is False

    def test_stat_fallback(self, make_device):
        assert should_close(make_device(statable=True)) is True
        assert should_close(make_device(statable=False)) is False


class TestStdlibLoggerSink:
    def test_add_reaches_stdlib_handlers(self, caplog):
        std = logging.getLogger("logtribe.tests.stdlib")
        sink = StdlibLoggerSink(std, progname="svc")
        with caplog.at_level(logging.DEBUG, logger="logtribe.tests.stdlib"):
            sink.add(Severity.WARN, "careful")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "careful"
        assert record.progname == "svc"

    def test_level_round_trip(self):
        sink = StdlibLoggerSink("logtribe.tests.stdlib.level")
        sink.level = "error"
        assert sink.logger.level == logging.ERROR
        assert sink.level is Severity.ERROR

    def test_level_setter_clamps_out_of_range_ints(self):
        sink = StdlibLoggerSink("logtribe.tests.stdlib.clamp")
        sink.level = 9
        assert sink.logger.level == logging.CRITICAL
        sink.level = -1
        assert sink.logger.level == logging.DEBUG

    def test_block_skipped_when_disabled(self):
        sink = StdlibLoggerSink("logtribe.tests.stdlib.disabled")
        sink.level = Severity.FATAL
        called = []
        sink.add(Severity.INFO, block=lambda: called.append(1))
        assert called == []

    def test_multiplexer_wraps_bare_stdlib_logger(self, caplog):
        std = logging.getLogger("logtribe.tests.stdlib.bare")
        tribe = Multiplexer([std])
        with caplog.at_level(logging.INFO, logger="logtribe.tests.stdlib.bare"):
            tribe.info("through the tribe")
        assert caplog.records[-1].getMessage() == "through the tribe"


class TestJsonlTagPoster:
    def test_post_writes_tagged_line(self):
        buffer = io.StringIO()
        poster = JsonlTagPoster(buffer)
        poster.post("app.web", {"message": "hello"})
        record = json.loads(buffer.getvalue())
        assert record["tag"] == "app.web"
        assert record["message"] == "hello"
        assert "time" in record

    def test_file_round_trip_through_multiplexer(self, tmp_path):
        poster = JsonlTagPoster(tmp_path / "events.jsonl")
        tribe = Multiplexer(poster, {"tag_name": "app.worker"})
        tribe.error("failed job")
        tribe.write("raw")
        tribe.close()

        # No logdev: the multiplexer leaves the poster open.
        records = poster.read_records()
        poster.close()

        assert [r["tag"] for r in records] == ["app.worker", "app.worker"]
        assert "ERROR -- : failed job" in records[0]["message"]
        assert records[1]["message"] == "raw"

    def test_borrowed_stream_is_not_closed(self):
        buffer = io.StringIO()
        JsonlTagPoster(buffer).close()
        assert not buffer.closed
