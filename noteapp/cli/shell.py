"""
Interactive Shell Mode.

REPL over a single NoteStore, so selection and drafts persist between
commands. Uses Rich for output formatting and basic input handling.
"""

import shlex
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from noteapp.cli.commands.notes import (
    CommandFailed,
    add_note,
    build_store,
    delete_note,
    edit_note,
    list_notes,
    report_failure,
    show_note,
)
from noteapp.client.http import close_api_client
from noteapp.store.note_store import NoteStore

console = Console()


class InteractiveShell:
    """
    Interactive shell for note commands.

    Usage:
        shell = InteractiveShell()
        await shell.run()
    """

    def __init__(self, store: NoteStore | None = None) -> None:
        """Initialize the interactive shell."""
        self.running = False
        self.store = store or build_store()
        self.commands: dict[str, Callable] = {
            "help": self._cmd_help,
            "list": self._cmd_list,
            "show": self._cmd_show,
            "add": self._cmd_add,
            "edit": self._cmd_edit,
            "delete": self._cmd_delete,
            "clear": self._cmd_clear,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    async def run(self) -> None:
        """Run the interactive shell."""
        self.running = True

        console.print(Panel(
            "[bold]Note Shell[/bold]\n"
            "Type [cyan]help[/cyan] for available commands, [cyan]quit[/cyan] to exit.",
            title="Welcome",
        ))
        console.print()

        while self.running:
            try:
                user_input = console.input("[bold cyan]>[/bold cyan] ").strip()

                if not user_input:
                    continue

                await self.execute(user_input)

            except KeyboardInterrupt:
                console.print("\n[dim]Use 'quit' to exit[/dim]")
            except EOFError:
                break

        await close_api_client()
        console.print("[dim]Goodbye![/dim]")

    async def execute(self, line: str) -> None:
        """Parse and run one command line."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            return

        command = parts[0].lower()
        args = parts[1:]

        if command not in self.commands:
            console.print(f"[red]Unknown command: {command}[/red]")
            console.print("Type [cyan]help[/cyan] for available commands.")
            return

        try:
            await self.commands[command](args)
        except CommandFailed as e:
            report_failure(e.error)

    async def _cmd_help(self, args: list[str]) -> None:
        """Display help information."""
        table = Table(title="Available Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")

        table.add_row("help", "Show this help message")
        table.add_row("list", "List all notes")
        table.add_row("show <id>", "Show one note")
        table.add_row('add "<title>" ["<description>"]', "Add a note")
        table.add_row('edit <id> "<title>" ["<description>"]', "Edit a note")
        table.add_row("delete <id>", "Delete a note")
        table.add_row("clear", "Clear the screen")
        table.add_row("quit / exit", "Exit the shell")

        console.print(table)

    async def _cmd_list(self, args: list[str]) -> None:
        await list_notes(self.store)

    async def _cmd_show(self, args: list[str]) -> None:
        if not args:
            console.print("[yellow]Usage: show <id>[/yellow]")
            return
        await show_note(self.store, args[0])

    async def _cmd_add(self, args: list[str]) -> None:
        title = args[0] if args else ""
        description = args[1] if len(args) > 1 else ""
        await add_note(self.store, title, description)

    async def _cmd_edit(self, args: list[str]) -> None:
        if not args:
            console.print("[yellow]Usage: edit <id> <title> [description][/yellow]")
            return
        title = args[1] if len(args) > 1 else None
        description = args[2] if len(args) > 2 else None
        await edit_note(self.store, args[0], title, description)

    async def _cmd_delete(self, args: list[str]) -> None:
        # A missing id is passed through; the store reports it.
        await delete_note(self.store, args[0] if args else None)

    async def _cmd_clear(self, args: list[str]) -> None:
        """Clear the screen."""
        console.clear()

    async def _cmd_quit(self, args: list[str]) -> None:
        """Exit the shell."""
        self.running = False


async def run_shell() -> None:
    """Run the interactive shell."""
    shell = InteractiveShell()
    await shell.run()
