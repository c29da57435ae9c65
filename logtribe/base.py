"""Severity-named convenience layer over a generic ``add`` call.

``LeveledLogger`` is mixed into both the multiplexer and ``StreamLogger``.
Subclasses provide ``level``, ``formatter``, ``default_formatter`` and
``add(severity, message, progname, block)``; everything here is derived
from those.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from typing import Any

from logtribe.severity import Severity, severity_name

MessageBlock = Callable[[], Any]


class LeveledLogger(ABC):
    """Mixin providing ``debug`` .. ``unknown`` and level predicates."""

    level: int
    formatter: Any
    default_formatter: Any

    @abstractmethod
    def add(
        self,
        severity: int,
        message: Any = None,
        progname: Any = None,
        block: MessageBlock | None = None,
    ) -> bool:
        """Log *message* at *severity*; the one call every shortcut uses."""

    def log(
        self,
        severity: int,
        message: Any = None,
        progname: Any = None,
        block: MessageBlock | None = None,
    ) -> bool:
        return self.add(severity, message, progname, block)

    # ------------------------------------------------------------------
    # Severity shortcuts
    # ------------------------------------------------------------------

    def debug(self, message: Any = None, *, progname: Any = None,
              block: MessageBlock | None = None) -> bool:
        return self.add(Severity.DEBUG, message, progname, block)

    def info(self, message: Any = None, *, progname: Any = None,
             block: MessageBlock | None = None) -> bool:
        return self.add(Severity.INFO, message, progname, block)

    def warn(self, message: Any = None, *, progname: Any = None,
             block: MessageBlock | None = None) -> bool:
        return self.add(Severity.WARN, message, progname, block)

    warning = warn

    def error(self, message: Any = None, *, progname: Any = None,
              block: MessageBlock | None = None) -> bool:
        return self.add(Severity.ERROR, message, progname, block)

    def fatal(self, message: Any = None, *, progname: Any = None,
              block: MessageBlock | None = None) -> bool:
        return self.add(Severity.FATAL, message, progname, block)

    def unknown(self, message: Any = None, *, progname: Any = None,
                block: MessageBlock | None = None) -> bool:
        return self.add(Severity.UNKNOWN, message, progname, block)

    # ------------------------------------------------------------------
    # Level predicates
    # ------------------------------------------------------------------

    def is_enabled_for(self, severity: int) -> bool:
        return severity >= self.level

    def is_debug(self) -> bool:
        return self.is_enabled_for(Severity.DEBUG)

    def is_info(self) -> bool:
        return self.is_enabled_for(Severity.INFO)

    def is_warn(self) -> bool:
        return self.is_enabled_for(Severity.WARN)

    def is_error(self) -> bool:
        return self.is_enabled_for(Severity.ERROR)

    def is_fatal(self) -> bool:
        return self.is_enabled_for(Severity.FATAL)

    # ------------------------------------------------------------------
    # Formatting helpers
    # ------------------------------------------------------------------

    @staticmethod
    def format_severity(severity: int) -> str:
        return severity_name(severity)

    def format_message(
        self, severity: str, time: datetime, progname: Any, msg: Any
    ) -> str:
        """Format with the configured formatter, else the default one."""
        formatter = self.formatter or self.default_formatter
        return formatter(severity, time, progname, msg)
