"""
Note Commands.

List, show, add, edit and delete notes on the note server. Every command
drives a NoteStore with UI events, the same way a graphical front-end
would.
"""

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from noteapp.client.http import close_api_client, get_api_client
from noteapp.client.service import HttpNoteService
from noteapp.domain.note import Note
from noteapp.store.note_store import NoteStore
from noteapp.store.state import AnyUiEvent, UiEvent, UiState

app = typer.Typer(help="Note commands")
console = Console()


class CommandFailed(Exception):
    """An event ended in UiState.Error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(str(error))


def build_store() -> NoteStore:
    """Create a store backed by the shared API client."""
    return NoteStore(HttpNoteService(get_api_client()))


async def dispatch(store: NoteStore, event: AnyUiEvent) -> None:
    """
    Run one event to completion.

    Raises:
        CommandFailed: If any status published while handling was an Error.
            The first error wins; a later refresh does not hide it.
    """
    errors: list[Exception] = []

    def watch(state: object) -> None:
        if isinstance(state, UiState.Error):
            errors.append(state.error)

    unsubscribe = store.ui_state.subscribe(watch)
    try:
        await store.handle(event)
    finally:
        unsubscribe()
    if errors:
        raise CommandFailed(errors[0])


# =============================================================================
# Async implementations (shared with the interactive shell)
# =============================================================================


async def list_notes(store: NoteStore) -> None:
    await dispatch(store, UiEvent.OnGetAllNotes())
    render_notes(store.notes.value)


async def show_note(store: NoteStore, note_id: str) -> None:
    await dispatch(store, UiEvent.OnGetNote(note_id))
    if store.note.value is not None:
        render_note(store.note.value)


async def add_note(store: NoteStore, title: str, description: str) -> None:
    store.on_change_title(title)
    store.on_change_description(description)
    await dispatch(store, UiEvent.OnAddNote())
    console.print("[green]✓ Note added[/green]")
    render_notes(store.notes.value)


async def edit_note(
    store: NoteStore,
    note_id: str,
    title: str | None,
    description: str | None,
) -> None:
    await dispatch(store, UiEvent.OnGetNote(note_id))
    selected = store.note.value
    if selected is None:
        raise CommandFailed(LookupError(f"Note {note_id} not loaded"))

    store.on_change_title(title if title is not None else selected.title)
    store.on_change_description(
        description if description is not None else selected.description
    )
    await dispatch(store, UiEvent.OnUpdateNote())
    console.print("[green]✓ Note updated[/green]")
    render_notes(store.notes.value)


async def delete_note(store: NoteStore, note_id: str | None) -> None:
    await dispatch(store, UiEvent.OnDeleteNote(note_id))
    console.print("[green]✓ Note deleted[/green]")
    render_notes(store.notes.value)


# =============================================================================
# Rendering
# =============================================================================


def render_notes(notes: list[Note]) -> None:
    """Display notes as a table."""
    if not notes:
        console.print("[dim]No notes yet.[/dim]")
        return

    table = Table(title="Notes", show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Description")
    table.add_column("Created At", style="dim")

    for note in notes:
        table.add_row(note.id or "-", note.title, note.description or "-", note.created_at)

    console.print(table)


def render_note(note: Note) -> None:
    """Display a single note."""
    console.print(f"[bold cyan]{note.title}[/bold cyan]  [dim]{note.created_at}[/dim]")
    console.print(note.description or "[dim](no description)[/dim]")
    console.print(f"[dim]id: {note.id or '-'}[/dim]")


def report_failure(error: Exception) -> None:
    """Print a command failure the way all note commands do."""
    if isinstance(error, httpx.ConnectError):
        console.print("[red]Error: Cannot connect to note server[/red]")
        console.print("[dim]Check server.host/server.port in config/settings/application.yaml[/dim]")
    else:
        console.print(f"[red]Error: {error}[/red]")


def _run(coro_factory) -> None:
    """Run a command coroutine with a fresh store, exiting 1 on failure."""

    async def runner() -> None:
        store = build_store()
        try:
            await coro_factory(store)
        finally:
            await close_api_client()

    try:
        asyncio.run(runner())
    except CommandFailed as e:
        report_failure(e.error)
        raise typer.Exit(1)


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_command() -> None:
    """
    List all notes on the server.

    Examples:
        cli.py notes list
    """
    _run(list_notes)


@app.command("show")
def show_command(
    note_id: str = typer.Argument(..., help="Note ID"),
) -> None:
    """
    Show one note.

    Examples:
        cli.py notes show 42
    """
    _run(lambda store: show_note(store, note_id))


@app.command("add")
def add_command(
    title: str = typer.Option("", "--title", "-t", help="Note title"),
    description: str = typer.Option("", "--description", "-m", help="Note description"),
) -> None:
    """
    Add a note. At least one of title or description must be non-blank.

    Examples:
        cli.py notes add -t Groceries -m "milk, eggs"
    """
    _run(lambda store: add_note(store, title, description))


@app.command("edit")
def edit_command(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(None, "--description", "-m", help="New description"),
) -> None:
    """
    Edit a note. Fields not given keep their current value.

    Examples:
        cli.py notes edit 42 -t "Groceries (done)"
    """
    _run(lambda store: edit_note(store, note_id, title, description))


@app.command("delete")
def delete_command(
    note_id: str = typer.Argument(..., help="Note ID"),
) -> None:
    """
    Delete a note.

    Examples:
        cli.py notes delete 42
    """
    _run(lambda store: delete_note(store, note_id))
