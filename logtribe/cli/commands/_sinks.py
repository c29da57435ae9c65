"""Shared sink-flag handling for logtribe commands."""

from __future__ import annotations

from pathlib import Path

from logtribe.models.profile import SinkSpec


def sink_specs_from_flags(
    stdout: bool,
    stderr: bool,
    files: list[Path] | None,
    jsonl: list[Path] | None,
    stdlib: list[str] | None = None,
) -> list[SinkSpec]:
    """Translate command-line flags into an ordered ``SinkSpec`` list.

    Order is stdout, stderr, files, jsonl, stdlib. With no flags at all,
    a single stdout sink is returned.
    """
    specs: list[SinkSpec] = []
    if stdout:
        specs.append(SinkSpec(sink_type="stdout"))
    if stderr:
        specs.append(SinkSpec(sink_type="stderr"))
    for path in files or []:
        specs.append(SinkSpec(sink_type="file", config={"path": str(path)}))
    for path in jsonl or []:
        specs.append(SinkSpec(sink_type="jsonl", config={"path": str(path)}))
    for name in stdlib or []:
        specs.append(SinkSpec(sink_type="stdlib", config={"name": name}))
    return specs or [SinkSpec(sink_type="stdout")]
