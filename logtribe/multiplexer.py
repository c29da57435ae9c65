"""Multiplexer: one logger-shaped façade over a fixed list of sinks.

Every log call, attribute change and close request is forwarded to each
sink in construction order. Sinks may support different capability
subsets: leveled loggers receive ``add`` directly, tag posters receive a
pre-formatted message through ``post``, anything else is skipped.

Sink failures are not caught here. An exception raised by one sink
reaches the caller and later sinks are not visited for that call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, NamedTuple

from logtribe.base import LeveledLogger, MessageBlock
from logtribe.formatter import Formatter, FormatterCallable
from logtribe.models.capabilities import SinkCapabilities
from logtribe.severity import Severity
from logtribe.sinks import get_device, resolve_capabilities, should_close
from logtribe.sinks.stdlib import StdlibLoggerSink

logger = logging.getLogger(__name__)

DEFAULT_TAG = "none"


class _Binding(NamedTuple):
    sink: Any
    capabilities: SinkCapabilities


def _as_sequence(sink_or_sinks: Any) -> tuple[Any, ...]:
    if sink_or_sinks is None:
        return ()
    if isinstance(sink_or_sinks, (list, tuple)):
        return tuple(sink_or_sinks)
    if isinstance(sink_or_sinks, Iterable) and not isinstance(sink_or_sinks, (str, bytes)):
        # Generators and other one-shot iterables, but not sinks that
        # happen to be iterable file objects.
        if not callable(getattr(sink_or_sinks, "write", None)):
            return tuple(sink_or_sinks)
    return (sink_or_sinks,)


def _bind(sink: Any) -> _Binding:
    # A bare stdlib logger has a numeric ``level`` on a different scale.
    if isinstance(sink, logging.Logger):
        sink = StdlibLoggerSink(sink)
    return _Binding(sink, resolve_capabilities(sink))


class Multiplexer(LeveledLogger):
    """Send every log call to several destination loggers.

    Parameters
    ----------
    sink_or_sinks:
        One sink or an ordered collection of sinks. ``None`` entries are
        allowed and ignored.
    options:
        Optional mapping. ``tag_name`` sets the tag used for tag-poster
        sinks; it is removed from the stored options.

    Examples
    --------
    >>> import io
    >>> from logtribe.sinks.stream import StreamLogger
    >>> out, err = io.StringIO(), io.StringIO()
    >>> tribe = Multiplexer([StreamLogger(out), StreamLogger(err)])
    >>> tribe.info("hello")
    True
    >>> "hello" in out.getvalue() and "hello" in err.getvalue()
    True
    """

    def __init__(
        self,
        sink_or_sinks: Any,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        remaining = dict(options or {})
        self._tag_name: str | None = remaining.pop("tag_name", None)
        self._options = remaining
        self._sinks = _as_sequence(sink_or_sinks)
        self._bindings = tuple(_bind(sink) for sink in self._sinks if sink is not None)
        self._level: Severity | int = Severity.INFO
        self._progname: Any = None
        self._datetime_format: str | None = None
        self._formatter: FormatterCallable | None = None
        self._default_formatter = Formatter()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def sinks(self) -> tuple[Any, ...]:
        """The sinks as supplied, absent entries included."""
        return self._sinks

    @property
    def tag_name(self) -> str | None:
        return self._tag_name

    @property
    def options(self) -> dict[str, Any]:
        """Construction options other than ``tag_name``."""
        return dict(self._options)

    @property
    def default_formatter(self) -> Formatter:
        return self._default_formatter

    def capabilities(self) -> list[tuple[Any, SinkCapabilities]]:
        """Resolved capabilities of every present sink, in order."""
        return [(b.sink, b.capabilities) for b in self._bindings]

    # ------------------------------------------------------------------
    # Shared attributes
    # ------------------------------------------------------------------

    def _propagate(self, attribute: str, value: Any) -> None:
        for binding in self._bindings:
            if attribute in binding.capabilities.attributes:
                setattr(binding.sink, attribute, value)

    @property
    def level(self) -> Severity | int:
        """Logging severity threshold (e.g. ``Severity.INFO``)."""
        return self._level

    @level.setter
    def level(self, value: int | str) -> None:
        self._level = Severity.coerce(value)
        self._propagate("level", self._level)

    @property
    def progname(self) -> Any:
        """Program name to include in log messages."""
        return self._progname

    @progname.setter
    def progname(self, value: Any) -> None:
        self._progname = value
        self._propagate("progname", value)

    @property
    def datetime_format(self) -> str | None:
        """strftime format used for timestamps."""
        return self._datetime_format

    @datetime_format.setter
    def datetime_format(self, value: str | None) -> None:
        self._datetime_format = value
        self._propagate("datetime_format", value)

    @property
    def formatter(self) -> FormatterCallable | None:
        """Callable ``(severity, time, progname, msg) -> str``.

        Propagated to sinks only; the fallback path for tag posters always
        uses ``default_formatter``.
        """
        return self._formatter

    @formatter.setter
    def formatter(self, value: FormatterCallable | None) -> None:
        self._formatter = value
        self._propagate("formatter", value)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def _tag(self) -> str:
        return self._tag_name or DEFAULT_TAG

    def add(
        self,
        severity: int,
        message: Any = None,
        progname: Any = None,
        block: MessageBlock | None = None,
    ) -> bool:
        """Log a message through every sink.

        Leveled sinks receive the call unchanged, including the unevaluated
        *block*; each one evaluates it on its own if its threshold allows,
        so a block may run once per leveled sink. Tag posters receive the
        message rendered by ``default_formatter``. Always returns ``True``.
        """
        for binding in self._bindings:
            sink, caps = binding
            if caps.leveled:
                sink.add(severity, message, progname, block)
            elif caps.tag_poster:
                text = message
                if text is None and block is not None:
                    text = block()
                formatted = self._default_formatter(
                    self.format_severity(severity), datetime.now(), progname, text
                )
                sink.post(self._tag(), {"message": formatted})
            else:
                logger.debug("Skipping sink %r for add: no add or post", sink)
        return True

    def write(self, msg: Any) -> None:
        """Dump *msg* to every sink without any formatting."""
        for binding in self._bindings:
            sink, caps = binding
            if caps.raw_write:
                sink.write(msg)
            elif caps.tag_poster:
                sink.post(self._tag(), {"message": msg})
            else:
                logger.debug("Skipping sink %r for write: no write or post", sink)

    def __lshift__(self, msg: Any) -> Multiplexer:
        self.write(msg)
        return self

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Flush every sink device, closing only file-backed ones.

        Sinks without a device are left untouched, as are sinks writing to
        shared streams such as the console. The sink list itself is kept.
        """
        for binding in self._bindings:
            device = get_device(binding.sink)
            if device is None:
                continue
            if callable(getattr(device, "flush", None)):
                device.flush()
            if should_close(device):
                logger.debug("Closing file-backed sink %r", binding.sink)
                binding.sink.close()

    def __enter__(self) -> Multiplexer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Multiplexer(sinks={len(self._bindings)}, "
            f"tag_name={self._tag_name!r}, level={self._level!r})"
        )
