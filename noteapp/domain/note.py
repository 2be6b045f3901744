"""
Note Domain Model.

The in-memory note held in store state, and its mapping to and from the
wire record.
"""

from dataclasses import dataclass
from datetime import datetime

from noteapp.schemas.note import NoteTransferRecord

TIMESTAMP_FORMAT = "%m-%d-%Y %H:%M:%S"


@dataclass(frozen=True)
class Note:
    """A note. ``id`` is None for a draft not yet created on the server."""

    title: str
    description: str
    created_at: str
    id: str | None = None


def format_timestamp(moment: datetime) -> str:
    """Format a local datetime the way notes store it."""
    return moment.strftime(TIMESTAMP_FORMAT)


def to_transfer_record(note: Note) -> NoteTransferRecord:
    """Map a domain note to its wire record."""
    return NoteTransferRecord(
        id=note.id,
        note_title=note.title,
        description=note.description,
        created_at=note.created_at,
    )


def to_domain(record: NoteTransferRecord) -> Note:
    """Map a wire record back to a domain note."""
    return Note(
        id=record.id,
        title=record.note_title,
        description=record.description,
        created_at=record.created_at,
    )
