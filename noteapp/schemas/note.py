"""
Note Schemas.

Wire representation of a note as exchanged with the note server.
"""

from pydantic import BaseModel, ConfigDict, Field


class NoteTransferRecord(BaseModel):
    """
    JSON shape of a note on the wire.

    The title travels as ``noteTitle`` and the timestamp as ``createdAt``.
    Unknown incoming fields are ignored.
    """

    id: str | None = Field(default=None, description="Server-assigned identifier")
    note_title: str = Field(alias="noteTitle", description="Note title")
    description: str = Field(description="Note body, may be empty")
    created_at: str = Field(
        alias="createdAt",
        description="Client-side timestamp, MM-DD-YYYY HH:MM:SS",
        examples=["10-19-2026 14:05:09"],
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    def to_payload(self, include_id: bool = True) -> dict:
        """Serialize to a JSON-ready dict using wire field names."""
        exclude = None if include_id else {"id"}
        return self.model_dump(by_alias=True, exclude=exclude)
