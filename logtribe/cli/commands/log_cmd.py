"""``logtribe log`` — send one message through a multiplexer.

Builds the sinks named on the command line, applies the ``LOGTRIBE_*``
environment defaults, logs the message once and closes the multiplexer.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from logtribe.cli.commands._sinks import sink_specs_from_flags
from logtribe.config import TribeSettings
from logtribe.factory import build_multiplexer
from logtribe.severity import InvalidSeverityError, Severity
from logtribe.sinks.jsonl import JsonlTagPoster

console = Console(stderr=True)


def log_cmd(
    message: str = typer.Argument(..., help="Message to log."),
    severity: str = typer.Option("info", "--severity", "-s", help="Severity name."),
    stdout: bool = typer.Option(False, "--stdout", help="Log to standard output."),
    stderr: bool = typer.Option(False, "--stderr", help="Log to standard error."),
    files: list[Path] = typer.Option(None, "--file", "-f", help="Append to a log file."),
    jsonl: list[Path] = typer.Option(None, "--jsonl", "-j", help="Post to a JSONL file."),
    tag: str = typer.Option(None, "--tag", "-t", help="Tag for tag-poster sinks."),
    progname: str = typer.Option(None, "--progname", "-p", help="Program name."),
    raw: bool = typer.Option(False, "--raw", help="Write the message unformatted."),
) -> None:
    """Log MESSAGE to every requested sink."""
    try:
        level = Severity.coerce(severity)
    except InvalidSeverityError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    settings = TribeSettings()
    profile = settings.to_profile(sink_specs_from_flags(stdout, stderr, files, jsonl))
    overrides = {}
    if tag:
        overrides["tag_name"] = tag
    if progname:
        overrides["progname"] = progname
    if overrides:
        profile = profile.model_copy(update=overrides)

    try:
        tribe = build_multiplexer(profile)
    except ValueError as exc:
        console.print(f"[red]Cannot build sinks:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    try:
        with tribe:
            if raw:
                tribe.write(message if message.endswith("\n") else message + "\n")
            else:
                tribe.add(level, message)
    finally:
        # Tag posters have no device, so the multiplexer leaves them open.
        for sink in tribe.sinks:
            if isinstance(sink, JsonlTagPoster):
                sink.close()
