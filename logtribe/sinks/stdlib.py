"""Adapter exposing a stdlib ``logging.Logger`` as a leveled sink."""

from __future__ import annotations

import logging
from typing import Any

from logtribe.base import MessageBlock
from logtribe.formatter import Formatter
from logtribe.severity import Severity

_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.UNKNOWN: logging.CRITICAL,
}


def _stdlib_level(value: int | str | None) -> int:
    """Map a severity to a stdlib level, clamping ints outside the known range."""
    if value is None:
        return logging.CRITICAL
    if isinstance(value, int) and not isinstance(value, Severity):
        if value > Severity.UNKNOWN:
            return logging.CRITICAL
        if value < Severity.DEBUG:
            return logging.DEBUG
    return _STDLIB_LEVELS[Severity.coerce(value)]


class StdlibLoggerSink:
    """Forward ``add`` calls to a ``logging.Logger``.

    Handlers attached to the wrapped logger do the formatting, so this
    sink exposes ``level`` and ``progname`` but no ``formatter``. The
    progname travels as the ``progname`` record attribute.
    """

    def __init__(self, logger: logging.Logger | str, progname: str | None = None) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self.progname = progname

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def level(self) -> Severity:
        stdlib_level = self._logger.getEffectiveLevel()
        for severity, mapped in _STDLIB_LEVELS.items():
            if mapped >= stdlib_level:
                return severity
        return Severity.UNKNOWN

    @level.setter
    def level(self, value: int | str) -> None:
        self._logger.setLevel(_stdlib_level(value))

    def add(
        self,
        severity: int | None,
        message: Any = None,
        progname: Any = None,
        block: MessageBlock | None = None,
    ) -> bool:
        stdlib_level = _stdlib_level(severity)
        if not self._logger.isEnabledFor(stdlib_level):
            return True
        if progname is None:
            progname = self.progname
        if message is None:
            if block is not None:
                message = block()
            else:
                message, progname = progname, self.progname
        self._logger.log(
            stdlib_level,
            "%s",
            Formatter.msg2str(message),
            extra={"progname": progname},
        )
        return True
