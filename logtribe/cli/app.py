"""Main Typer application — imports and registers all CLI commands.

Entry point: ``logtribe`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from logtribe.cli.commands.log_cmd import log_cmd
from logtribe.cli.commands.sinks_cmd import sinks_cmd

app = typer.Typer(
    name="logtribe",
    help="logtribe: log once, deliver to every sink.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="log", help="Log a message through every requested sink.")(log_cmd)
app.command(name="sinks", help="Show resolved sink capabilities (creates any --file/--jsonl paths).")(sinks_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
