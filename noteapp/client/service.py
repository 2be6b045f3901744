"""
Note Service.

CRUD operations on notes through the remote note server.

NoteService is the capability set the store depends on; HttpNoteService
implements it over HTTP/JSON. Every operation returns a Result: an
unexpected HTTP status becomes Failure(HttpStatusError), a body that
cannot be decoded becomes Failure(ValueError). Transport errors
(httpx.HTTPError) are not caught here.

Routes:
    GET    /notes       list       200
    GET    /notes/{id}  get        200
    POST   /notes       create     201
    PUT    /notes/{id}  update     200
    DELETE /notes/{id}  delete     200
"""

from abc import ABC, abstractmethod

import httpx
from pydantic import TypeAdapter

from noteapp.client.http import APIClient
from noteapp.client.result import Failure, Result, Success
from noteapp.core.exceptions import HttpStatusError
from noteapp.core.logging import get_logger, log_with_source
from noteapp.schemas.note import NoteTransferRecord

logger = get_logger(__name__)

SUCCESS = "operation successful."

_record_list = TypeAdapter(list[NoteTransferRecord])


class NoteService(ABC):
    """Capability set for remote note CRUD."""

    @abstractmethod
    async def get_note(self, note_id: str) -> Result[NoteTransferRecord]:
        """Fetch one note by id."""

    @abstractmethod
    async def get_all_notes(self) -> Result[list[NoteTransferRecord]]:
        """Fetch every note."""

    @abstractmethod
    async def delete_note(self, note_id: str) -> Result[str]:
        """Delete a note by id."""

    @abstractmethod
    async def update_note(self, record: NoteTransferRecord) -> Result[str]:
        """Replace a note with the given record."""

    @abstractmethod
    async def add_note(self, record: NoteTransferRecord) -> Result[str]:
        """Create a note from the given record."""


class Endpoints:
    """URLs of the note routes under one base URL."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def get_all_notes(self) -> str:
        return f"{self.base_url}/notes"

    def add_note(self) -> str:
        return f"{self.base_url}/notes"

    def get_note_by_id(self, note_id: str) -> str:
        return f"{self.base_url}/notes/{note_id}"

    def update_note(self, note_id: str) -> str:
        return f"{self.base_url}/notes/{note_id}"

    def delete_note(self, note_id: str) -> str:
        return f"{self.base_url}/notes/{note_id}"


class HttpNoteService(NoteService):
    """
    NoteService over HTTP/JSON.

    Usage:
        service = HttpNoteService(APIClient())
        result = await service.get_all_notes()
    """

    def __init__(self, client: APIClient) -> None:
        self.client = client
        self.endpoints = Endpoints(client.base_url)

    async def get_note(self, note_id: str) -> Result[NoteTransferRecord]:
        """
        Retrieve a note by its identifier.

        Args:
            note_id: Note ID

        Returns:
            Success with the record on 200, Failure otherwise
        """
        response = await self.client.get(self.endpoints.get_note_by_id(note_id))
        if response.status_code != httpx.codes.OK:
            return self._bad_status("get_note", response)
        try:
            record = NoteTransferRecord.model_validate_json(response.content)
        except ValueError as e:
            return self._bad_body("get_note", e)
        log_with_source(logger, "client", "info", "get_note succeeded", note_id=note_id)
        return Success(record)

    async def get_all_notes(self) -> Result[list[NoteTransferRecord]]:
        """
        Retrieve all notes.

        Returns:
            Success with the records on 200, Failure otherwise
        """
        response = await self.client.get(self.endpoints.get_all_notes())
        if response.status_code != httpx.codes.OK:
            return self._bad_status("get_all_notes", response)
        try:
            records = _record_list.validate_json(response.content)
        except ValueError as e:
            return self._bad_body("get_all_notes", e)
        log_with_source(logger, "client", "info", "get_all_notes succeeded", count=len(records))
        return Success(records)

    async def delete_note(self, note_id: str) -> Result[str]:
        """
        Delete a note by its identifier.

        The success payload is a fixed confirmation, not the server body.
        """
        response = await self.client.delete(self.endpoints.delete_note(note_id))
        if response.status_code != httpx.codes.OK:
            return self._bad_status("delete_note", response)
        log_with_source(logger, "client", "info", "delete_note succeeded", note_id=note_id)
        return Success(f"Delete {SUCCESS}")

    async def update_note(self, record: NoteTransferRecord) -> Result[str]:
        """
        Replace an existing note.

        A record without an id is sent to ``/notes/`` (empty id segment);
        the server is expected to reject it.
        """
        response = await self.client.put(
            self.endpoints.update_note(record.id or ""),
            json=record.to_payload(),
        )
        if response.status_code != httpx.codes.OK:
            return self._bad_status("update_note", response)
        log_with_source(logger, "client", "info", "update_note succeeded", note_id=record.id)
        return Success(f"Update {SUCCESS}")

    async def add_note(self, record: NoteTransferRecord) -> Result[str]:
        """
        Create a note. The id is never sent; success is 201 Created only.
        """
        response = await self.client.post(
            self.endpoints.add_note(),
            json=record.to_payload(include_id=False),
        )
        if response.status_code != httpx.codes.CREATED:
            return self._bad_status("add_note", response)
        log_with_source(logger, "client", "info", "add_note succeeded")
        return Success(f"Add note {SUCCESS}")

    def _bad_status(self, operation: str, response: httpx.Response) -> Failure:
        error = HttpStatusError(response.status_code)
        log_with_source(
            logger,
            "client",
            "error",
            f"{operation} failed",
            status_code=response.status_code,
            error=error.message,
        )
        return Failure(error)

    def _bad_body(self, operation: str, error: ValueError) -> Failure:
        log_with_source(
            logger,
            "client",
            "error",
            f"{operation} returned an undecodable body",
            error=str(error),
        )
        return Failure(error)
