"""Tests for severity coercion/naming and the default Formatter."""

from __future__ import annotations

import os
from datetime import datetime

import pytest

from logtribe.formatter import DEFAULT_DATETIME_FORMAT, Formatter
from logtribe.severity import InvalidSeverityError, Severity, severity_name


class TestSeverity:
    def test_ordering(self):
        assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR
        assert Severity.ERROR < Severity.FATAL < Severity.UNKNOWN

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("debug", Severity.DEBUG),
            ("INFO", Severity.INFO),
            ("warn", Severity.WARN),
            ("Warning", Severity.WARN),
            (3, Severity.ERROR),
            (Severity.FATAL, Severity.FATAL),
            ("2", Severity.WARN),
            (" 5 ", Severity.UNKNOWN),
        ],
    )
    def test_coerce(self, value, expected):
        assert Severity.coerce(value) is expected

    @pytest.mark.parametrize("value", ["verbose", 42, -1, "9", "-1", None, True, 1.5])
    def test_coerce_rejects(self, value):
        with pytest.raises(InvalidSeverityError, match="invalid log level"):
            Severity.coerce(value)

    def test_invalid_severity_is_a_value_error(self):
        assert issubclass(InvalidSeverityError, ValueError)

    def test_severity_name(self):
        assert severity_name(Severity.WARN) == "WARN"
        assert severity_name(0) == "DEBUG"
        assert severity_name(99) == "ANY"


class TestFormatter:
    def test_line_layout(self):
        time = datetime(2024, 5, 1, 12, 0, 0, 5)
        line = Formatter()("WARN", time, "app", "careful")
        assert line == (
            f"W, [2024-05-01T12:00:00.000005 #{os.getpid()}]  WARN -- app: careful\n"
        )

    def test_datetime_format_override(self):
        time = datetime(2024, 5, 1, 12, 30, 0)
        line = Formatter("%H:%M")("INFO", time, None, "x")
        assert line.startswith("I, [12:30 #")
        assert line.endswith("INFO -- : x\n")

    def test_default_datetime_format(self):
        assert Formatter().datetime_format is None
        time = datetime(2024, 1, 2, 3, 4, 5)
        assert Formatter().format_datetime(time) == time.strftime(DEFAULT_DATETIME_FORMAT)

    def test_msg2str_non_string_uses_repr(self):
        assert Formatter.msg2str({"a": 1}) == "{'a': 1}"
        assert Formatter.msg2str("plain") == "plain"

    def test_msg2str_exception_includes_class(self):
        assert Formatter.msg2str(ValueError("bad")) == "bad (ValueError)"

    def test_msg2str_raised_exception_includes_traceback(self):
        try:
            raise KeyError("missing")
        except KeyError as exc:
            text = Formatter.msg2str(exc)
        assert text.startswith("'missing' (KeyError)\n")
        assert "test_msg2str_raised_exception_includes_traceback" in text


class TestLeveledLoggerBase:
    def test_add_is_abstract(self):
        from logtribe.base import LeveledLogger

        with pytest.raises(TypeError):
            LeveledLogger()
