"""Sink capability protocols for logtribe.

A sink is any object; the multiplexer never requires a common base class.
Instead each capability is a small runtime-checkable protocol and
``resolve_capabilities`` records which ones a sink satisfies:

- ``LeveledSink``: ``add(severity, message, progname, block)``
- ``RawWriteSink``: ``write(msg)``
- ``TagPosterSink``: ``post(tag, payload)``
- ``DeviceBackedSink``: a ``logdev`` handle used at close time
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from logtribe.models.capabilities import SETTABLE_ATTRIBUTES, SinkCapabilities


@runtime_checkable
class LeveledSink(Protocol):
    """A sink that accepts structured severity/message/progname calls."""

    def add(
        self,
        severity: int,
        message: Any = None,
        progname: Any = None,
        block: Callable[[], Any] | None = None,
    ) -> Any:
        ...


@runtime_checkable
class RawWriteSink(Protocol):
    """A sink that accepts an unformatted dump."""

    def write(self, msg: Any) -> Any:
        ...


@runtime_checkable
class TagPosterSink(Protocol):
    """A sink that accepts a destination tag plus a payload mapping."""

    def post(self, tag: str, payload: dict[str, Any]) -> Any:
        ...


@runtime_checkable
class DeviceBackedSink(Protocol):
    """A sink owning a log device (file handle or stream wrapper)."""

    @property
    def logdev(self) -> Any:
        ...


def resolve_capabilities(sink: Any) -> SinkCapabilities:
    """Resolve which operations and attributes *sink* supports."""
    return SinkCapabilities(
        leveled=isinstance(sink, LeveledSink) and callable(sink.add),
        raw_write=isinstance(sink, RawWriteSink) and callable(sink.write),
        tag_poster=isinstance(sink, TagPosterSink) and callable(sink.post),
        attributes=frozenset(a for a in SETTABLE_ATTRIBUTES if hasattr(sink, a)),
    )


def get_device(sink: Any) -> Any:
    """Return the sink's log device, or ``None`` if it has none."""
    if not isinstance(sink, DeviceBackedSink):
        return None
    return sink.logdev


def should_close(device: Any) -> bool:
    """Close policy: close only sinks whose device is file-backed.

    A device states this with a ``file_backed`` attribute. Devices that do
    not declare it are treated as file-backed when they expose ``stat``,
    so console streams are never closed by accident.
    """
    declared = getattr(device, "file_backed", None)
    if declared is not None:
        return bool(declared)
    return callable(getattr(device, "stat", None))


__all__ = [
    "DeviceBackedSink",
    "LeveledSink",
    "RawWriteSink",
    "TagPosterSink",
    "get_device",
    "resolve_capabilities",
    "should_close",
]
