"""Build sinks and multiplexers from ``SinkSpec`` / ``TribeProfile`` models."""

from __future__ import annotations

import logging
import sys
from typing import Any

from logtribe.models.profile import SinkSpec, TribeProfile
from logtribe.multiplexer import Multiplexer
from logtribe.sinks.jsonl import JsonlTagPoster
from logtribe.sinks.stdlib import StdlibLoggerSink
from logtribe.sinks.stream import StreamLogger

logger = logging.getLogger(__name__)

SINK_TYPES = ("stdout", "stderr", "file", "jsonl", "stdlib")


class UnknownSinkTypeError(ValueError):
    """Raised when a ``SinkSpec`` names a sink type logtribe cannot build."""


def _require_path(spec: SinkSpec) -> str:
    path = spec.config.get("path")
    if not path:
        raise ValueError(f"sink type {spec.sink_type!r} requires a 'path' config key")
    return str(path)


def build_sink(spec: SinkSpec) -> Any:
    """Create the sink described by *spec*."""
    if spec.sink_type == "stdout":
        return StreamLogger(sys.stdout)
    if spec.sink_type == "stderr":
        return StreamLogger(sys.stderr)
    if spec.sink_type == "file":
        return StreamLogger(_require_path(spec))
    if spec.sink_type == "jsonl":
        return JsonlTagPoster(_require_path(spec))
    if spec.sink_type == "stdlib":
        return StdlibLoggerSink(spec.config.get("name", "logtribe"))
    raise UnknownSinkTypeError(
        f"unknown sink type {spec.sink_type!r}; expected one of {', '.join(SINK_TYPES)}"
    )


def build_multiplexer(profile: TribeProfile) -> Multiplexer:
    """Build every enabled sink in order and apply the profile attributes."""
    sinks = [build_sink(spec) for spec in profile.sinks if spec.enabled]
    tribe = Multiplexer(sinks, {"tag_name": profile.tag_name})
    tribe.level = profile.level
    if profile.progname is not None:
        tribe.progname = profile.progname
    if profile.datetime_format is not None:
        tribe.datetime_format = profile.datetime_format
    logger.info(
        "Built multiplexer with %d sink(s): %s",
        len(sinks),
        ", ".join(spec.sink_type for spec in profile.sinks if spec.enabled),
    )
    return tribe
