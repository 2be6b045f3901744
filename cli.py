#!/usr/bin/env python3
"""
Note Client CLI.

Command-line front-end for the remote note server.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                  # Show help

    # Notes
    python cli.py notes list                              # List all notes
    python cli.py notes show 42                           # Show one note
    python cli.py notes add -t Groceries -m "milk"        # Add a note
    python cli.py notes edit 42 -t "Groceries (done)"     # Edit a note
    python cli.py notes delete 42                         # Delete a note

    # System
    python cli.py version                                 # Show version

    # Interactive mode
    python cli.py shell                                   # Start interactive shell

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import asyncio

import typer
from rich.console import Console

from noteapp.cli.commands import notes_app
from noteapp.core.config import validate_project_root

app = typer.Typer(
    name="cli",
    help="Note Client CLI - list, add, edit and delete notes on the note server.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")


@app.command()
def shell() -> None:
    """
    Start interactive shell mode.

    Keeps one note store alive so selections and drafts carry over.
    """
    from noteapp.cli.shell import run_shell

    asyncio.run(run_shell())


@app.command()
def version() -> None:
    """Show application name and version."""
    from noteapp.core.config import get_app_config

    application = get_app_config().application
    console.print(f"{application.name} v{application.version}")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Note Client CLI.

    Talks to the note server configured in config/settings/application.yaml.
    """
    validate_project_root()

    from noteapp.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging(level="WARNING")


if __name__ == "__main__":
    app()
