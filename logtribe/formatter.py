"""Default message formatter.

A formatter is any callable taking ``(severity_name, time, progname, msg)``
and returning the string to write. ``Formatter`` is the one used when a
logger has no formatter of its own, and the one the multiplexer applies
on its tag-poster fallback path.
"""

from __future__ import annotations

import os
import traceback
from collections.abc import Callable
from datetime import datetime
from typing import Any

FormatterCallable = Callable[[str, datetime, Any, Any], str]

DEFAULT_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


class Formatter:
    """Render one log record as a single line.

    Output looks like::

        I, [2024-05-01T12:00:00.000000 #4242]  INFO -- app: started
    """

    line_format = "%.1s, [%s #%d] %5s -- %s: %s\n"

    def __init__(self, datetime_format: str | None = None) -> None:
        self.datetime_format = datetime_format

    def __call__(
        self, severity: str, time: datetime, progname: Any, msg: Any
    ) -> str:
        return self.line_format % (
            severity,
            self.format_datetime(time),
            os.getpid(),
            severity,
            "" if progname is None else progname,
            self.msg2str(msg),
        )

    def format_datetime(self, time: datetime) -> str:
        return time.strftime(self.datetime_format or DEFAULT_DATETIME_FORMAT)

    @staticmethod
    def msg2str(msg: Any) -> str:
        """Convert a message object to text.

        Strings pass through, exceptions include their class and traceback,
        anything else is rendered with ``repr``.
        """
        if isinstance(msg, str):
            return msg
        if isinstance(msg, BaseException):
            text = f"{msg} ({type(msg).__name__})"
            if msg.__traceback__ is not None:
                text += "\n" + "".join(traceback.format_tb(msg.__traceback__)).rstrip("\n")
            return text
        return repr(msg)
