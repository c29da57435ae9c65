"""logtribe CLI: Typer-based command-line interface.

Provides the ``logtribe`` command: ``log`` sends a message through a
multiplexer built from command-line sink flags, ``sinks`` shows how the
multiplexer resolved each sink's capabilities.

All output uses Rich for formatted terminal display.
"""
