"""Capability record resolved once per sink."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

SETTABLE_ATTRIBUTES: tuple[str, ...] = ("level", "progname", "datetime_format", "formatter")


class SinkCapabilities(BaseModel):
    """Which multiplexer operations a sink can receive directly.

    ``attributes`` is the subset of ``SETTABLE_ATTRIBUTES`` the sink exposes.
    """

    model_config = ConfigDict(frozen=True)

    leveled: bool = False      # has add(severity, message, progname, block)
    raw_write: bool = False    # has write(msg)
    tag_poster: bool = False   # has post(tag, payload)
    attributes: frozenset[str] = frozenset()

    @property
    def reachable(self) -> bool:
        """Whether ``add`` or ``write`` can deliver anything to the sink."""
        return self.leveled or self.raw_write or self.tag_poster

    def labels(self) -> list[str]:
        labels = []
        if self.leveled:
            labels.append("add")
        if self.raw_write:
            labels.append("write")
        if self.tag_poster:
            labels.append("post")
        return labels
