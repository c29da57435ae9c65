"""StreamLogger: a complete leveled logger writing to a ``LogDevice``.

This is the "leveled logger" sink kind: it filters by its own threshold,
evaluates the lazy message block only when the threshold lets the record
through, formats with its own formatter, and supports raw writes.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import IO, Any

from logtribe.base import LeveledLogger, MessageBlock
from logtribe.formatter import Formatter, FormatterCallable
from logtribe.severity import Severity
from logtribe.sinks.device import LogDevice


class StreamLogger(LeveledLogger):
    """Leveled logger over a stream or a file path.

    Parameters
    ----------
    target:
        Stream or path handed to ``LogDevice``; ``None`` creates a logger
        that discards everything.
    level:
        Initial threshold (int, ``Severity`` or name).
    progname:
        Default program name used when a call does not pass one.
    """

    def __init__(
        self,
        target: IO[str] | Path | str | None,
        level: int | str = Severity.DEBUG,
        progname: str | None = None,
        formatter: FormatterCallable | None = None,
        datetime_format: str | None = None,
    ) -> None:
        self._logdev = LogDevice(target) if target is not None else None
        self._level = Severity.coerce(level)
        self.progname = progname
        self.formatter = formatter
        self.default_formatter = Formatter()
        self.datetime_format = datetime_format

    @property
    def logdev(self) -> LogDevice | None:
        return self._logdev

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, value: int | str) -> None:
        self._level = Severity.coerce(value)

    @property
    def datetime_format(self) -> str | None:
        return self.default_formatter.datetime_format

    @datetime_format.setter
    def datetime_format(self, value: str | None) -> None:
        self.default_formatter.datetime_format = value

    def add(
        self,
        severity: int | None,
        message: Any = None,
        progname: Any = None,
        block: MessageBlock | None = None,
    ) -> bool:
        """Log a record if *severity* reaches the threshold.

        When *message* is ``None`` the block supplies it; with neither,
        *progname* is treated as the message. Always returns ``True``.
        """
        if severity is None:
            severity = Severity.UNKNOWN
        if self._logdev is None or severity < self._level:
            return True
        if progname is None:
            progname = self.progname
        if message is None:
            if block is not None:
                message = block()
            else:
                message = progname
                progname = self.progname
        self._logdev.write(
            self.format_message(
                self.format_severity(severity), datetime.now(), progname, message
            )
        )
        return True

    def write(self, msg: Any) -> None:
        """Dump *msg* to the device without formatting."""
        if self._logdev is not None:
            self._logdev.write(msg if isinstance(msg, str) else str(msg))

    def close(self) -> None:
        if self._logdev is not None:
            self._logdev.close()

    def __repr__(self) -> str:
        return f"StreamLogger({self._logdev!r}, level={self._level.name})"
