"""Declarative multiplexer profile: which sinks to build and how to set them up."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from logtribe.severity import Severity


class SinkSpec(BaseModel):
    """A single sink configuration.

    ``sink_type`` is one of ``"stdout"``, ``"stderr"``, ``"file"``,
    ``"jsonl"`` or ``"stdlib"``; ``config`` carries type-specific keys
    (``path`` for file-backed sinks, ``name`` for stdlib loggers).
    """

    model_config = ConfigDict(frozen=True)

    sink_type: str
    config: dict[str, Any] = {}
    enabled: bool = True


class TribeProfile(BaseModel):
    """Everything needed to build one multiplexer."""

    model_config = ConfigDict(frozen=True)

    tag_name: str | None = None
    level: Severity = Severity.INFO
    progname: str | None = None
    datetime_format: str | None = None
    sinks: list[SinkSpec] = [SinkSpec(sink_type="stdout")]

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Severity:
        return Severity.coerce(value)
