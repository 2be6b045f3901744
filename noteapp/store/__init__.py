"""
Note Store Package.

Observable view-model state for a note list and detail UI.

Usage:
    from noteapp.store import NoteStore, UiEvent

    store = NoteStore(service)
    store.on_ui_event(UiEvent.OnGetAllNotes())
"""

from noteapp.store.note_store import NoteStore
from noteapp.store.observable import StateFlow
from noteapp.store.state import UiEvent, UiState

__all__ = ["NoteStore", "StateFlow", "UiEvent", "UiState"]
