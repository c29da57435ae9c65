"""``logtribe sinks`` — show how a multiplexer sees its sinks.

Builds the sinks named on the command line and prints, for each one,
which operations it receives directly and which shared attributes the
multiplexer propagates to it.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from logtribe.cli.commands._sinks import sink_specs_from_flags
from logtribe.config import TribeSettings
from logtribe.factory import build_multiplexer
from logtribe.models.capabilities import SETTABLE_ATTRIBUTES
from logtribe.sinks import get_device, should_close

console = Console()


def sinks_cmd(
    stdout: bool = typer.Option(False, "--stdout", help="Include a stdout sink."),
    stderr: bool = typer.Option(False, "--stderr", help="Include a stderr sink."),
    files: list[Path] = typer.Option(None, "--file", "-f", help="Include a file sink (created if missing)."),
    jsonl: list[Path] = typer.Option(None, "--jsonl", "-j", help="Include a JSONL sink (created if missing)."),
    stdlib: list[str] = typer.Option(None, "--stdlib", help="Include a stdlib logger."),
) -> None:
    """List resolved sink capabilities.

    The sinks are really built, so ``--file`` and ``--jsonl`` paths (and
    their parent directories) are created if missing.
    """
    specs = sink_specs_from_flags(stdout, stderr, files, jsonl, stdlib)
    tribe = build_multiplexer(TribeSettings().to_profile(specs))

    table = Table(title="Sinks", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Receives")
    table.add_column("Attributes")
    table.add_column("Closed on close()", justify="center")

    for index, (spec, (sink, caps)) in enumerate(zip(specs, tribe.capabilities()), start=1):
        device = get_device(sink)
        closes = device is not None and should_close(device)
        attributes = [a for a in SETTABLE_ATTRIBUTES if a in caps.attributes]
        table.add_row(
            str(index),
            spec.sink_type,
            ", ".join(caps.labels()) or "[dim]nothing[/dim]",
            ", ".join(attributes) or "[dim]-[/dim]",
            "[green]Yes[/green]" if closes else "[dim]No[/dim]",
        )

    console.print(table)
    console.print(f"[dim]tag: {tribe.tag_name or 'none'}  level: {tribe.level.name}[/dim]")
    for sink in tribe.sinks:
        close = getattr(sink, "close", None)
        if callable(close):
            close()
