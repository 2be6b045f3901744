"""
UI Events and States.

Closed sets of variants exchanged between the UI and NoteStore.
Match on them exhaustively:

    match state:
        case UiState.Loading():
            ...
        case UiState.Success(message=message):
            ...
        case UiState.Error(error=error):
            ...
"""

from dataclasses import dataclass


class UiEvent:
    """Events the UI sends to the store."""

    @dataclass(frozen=True)
    class OnGetAllNotes:
        pass

    @dataclass(frozen=True)
    class OnGetNote:
        id: str

    @dataclass(frozen=True)
    class OnAddNote:
        pass

    @dataclass(frozen=True)
    class OnUpdateNote:
        pass

    @dataclass(frozen=True)
    class OnDeleteNote:
        id: str | None


class UiState:
    """Status of the most recent operation."""

    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        message: str | None = None

    @dataclass(frozen=True)
    class Error:
        error: Exception

        @property
        def message(self) -> str:
            return str(self.error)


AnyUiEvent = (
    UiEvent.OnGetAllNotes
    | UiEvent.OnGetNote
    | UiEvent.OnAddNote
    | UiEvent.OnUpdateNote
    | UiEvent.OnDeleteNote
)

AnyUiState = UiState.Loading | UiState.Success | UiState.Error
