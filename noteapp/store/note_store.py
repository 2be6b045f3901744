"""
Note Store.

View-model between the UI and the note service. Holds observable state
and turns UI events into service calls.

Every mutating event ends with a full list refresh: the server is the
only source of truth and no local patching is done. Events run as
independent asyncio tasks with no ordering between them, so the last
write to each channel wins.

Usage:
    store = NoteStore(HttpNoteService(APIClient()))
    store.notes.subscribe(render_list)
    store.on_change_title("Groceries")
    await store.handle(UiEvent.OnAddNote())
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import replace
from datetime import datetime
from typing import TypeVar

import httpx

from noteapp.client.result import Failure, Result, Success
from noteapp.client.service import NoteService
from noteapp.core.exceptions import ValidationError
from noteapp.core.logging import get_logger, log_with_source
from noteapp.domain.note import Note, format_timestamp, to_domain, to_transfer_record
from noteapp.store.observable import StateFlow
from noteapp.store.state import AnyUiEvent, AnyUiState, UiEvent, UiState

logger = get_logger(__name__)

ValueT = TypeVar("ValueT")

BLANK_DRAFT_MESSAGE = "Title or description is null it shouldn't be it."
MISSING_ID_MESSAGE = "Id not found!"
NO_SELECTION_MESSAGE = "No note selected!"


class NoteStore:
    """
    Observable note state driven by UI events.

    Channels:
        ui_state    - status of the latest operation
        notes       - last fetched list
        note        - note selected for editing, or None
        title       - draft title
        description - draft description
    """

    def __init__(
        self,
        service: NoteService,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.service = service
        self._clock = clock
        self._tasks: set[asyncio.Task] = set()

        self.ui_state: StateFlow[AnyUiState] = StateFlow(UiState.Loading())
        self.notes: StateFlow[list[Note]] = StateFlow([])
        self.note: StateFlow[Note | None] = StateFlow(None)
        self.title: StateFlow[str] = StateFlow("")
        self.description: StateFlow[str] = StateFlow("")

    # -------------------------------------------------------------------------
    # UI entry points
    # -------------------------------------------------------------------------

    def start(self) -> asyncio.Task:
        """Kick off the initial list load."""
        return self.on_ui_event(UiEvent.OnGetAllNotes())

    def on_ui_event(self, event: AnyUiEvent) -> asyncio.Task:
        """
        Handle an event in its own task.

        Must be called from a running event loop. The task is returned so
        callers may await it; the store keeps a reference until it finishes.
        """
        task = asyncio.get_running_loop().create_task(self.handle(event))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            log_with_source(
                logger, "store", "error", "UI event task failed",
                error=str(error), error_type=type(error).__name__,
            )

    async def handle(self, event: AnyUiEvent) -> None:
        """Handle an event inline."""
        match event:
            case UiEvent.OnGetAllNotes():
                await self._get_all_notes()
            case UiEvent.OnGetNote(id=note_id):
                await self._get_note(note_id)
            case UiEvent.OnAddNote():
                await self._add_note()
            case UiEvent.OnUpdateNote():
                await self._update_note()
            case UiEvent.OnDeleteNote(id=note_id):
                await self._delete_note(note_id)
            case _:
                raise TypeError(f"Unknown UI event: {event!r}")

    async def join(self) -> None:
        """Wait until every spawned event task has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def on_select_note(self, note: Note) -> None:
        self.note.value = note

    def on_change_title(self, title: str) -> None:
        self.title.value = title

    def on_change_description(self, description: str) -> None:
        self.description.value = description

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    async def _get_all_notes(self) -> None:
        self.ui_state.value = UiState.Loading()
        match await self._call(self.service.get_all_notes):
            case Success(value=records):
                self.notes.value = [to_domain(record) for record in records]
                self.ui_state.value = UiState.Success()
            case Failure(error=error):
                self._fail("get_all_notes", error)

    async def _get_note(self, note_id: str) -> None:
        self.ui_state.value = UiState.Loading()
        match await self._call(self.service.get_note, note_id):
            case Success(value=record):
                self.note.value = to_domain(record)
                log_with_source(logger, "store", "info", "Note selected", note_id=note_id)
            case Failure(error=error):
                self._fail("get_note", error)

    async def _add_note(self) -> None:
        self.ui_state.value = UiState.Loading()
        # Only the all-blank draft is rejected; a blank title alone passes.
        if not self.title.value.strip() and not self.description.value.strip():
            self._fail("add_note", ValidationError(BLANK_DRAFT_MESSAGE))
            return

        draft = Note(
            title=self.title.value,
            description=self.description.value,
            created_at=self._now(),
        )
        match await self._call(self.service.add_note, to_transfer_record(draft)):
            case Success(value=message):
                log_with_source(logger, "store", "info", "add_note succeeded", result=message)
            case Failure(error=error):
                self._fail("add_note", error)

        await self._get_all_notes()

    async def _update_note(self) -> None:
        selected = self.note.value
        if selected is None:
            self._fail("update_note", ValidationError(NO_SELECTION_MESSAGE))
            return

        updated = replace(
            selected,
            title=self.title.value,
            description=self.description.value,
            created_at=self._now(),
        )
        match await self._call(self.service.update_note, to_transfer_record(updated)):
            case Success(value=message):
                log_with_source(logger, "store", "info", "update_note succeeded", result=message)
                self.ui_state.value = UiState.Success(message)
            case Failure(error=error):
                self._fail("update_note", error)

        await self._get_all_notes()

    async def _delete_note(self, note_id: str | None) -> None:
        self.ui_state.value = UiState.Loading()
        if note_id is None:
            self._fail("delete_note", ValidationError(MISSING_ID_MESSAGE))
            return

        match await self._call(self.service.delete_note, note_id):
            case Success(value=message):
                log_with_source(logger, "store", "info", "delete_note succeeded", result=message)
                self.ui_state.value = UiState.Success(message)
            case Failure(error=error):
                self._fail("delete_note", error)

        await self._get_all_notes()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _call(
        self,
        operation: Callable[..., Awaitable[Result[ValueT]]],
        *args: object,
    ) -> Result[ValueT]:
        """Run a service call, turning transport errors into a Failure."""
        try:
            return await operation(*args)
        except httpx.HTTPError as e:
            return Failure(e)

    def _fail(self, operation: str, error: Exception) -> None:
        log_with_source(
            logger,
            "store",
            "error",
            f"{operation} failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self.ui_state.value = UiState.Error(error)

    def _now(self) -> str:
        return format_timestamp(self._clock())
