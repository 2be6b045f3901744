"""
Unit Test Fixtures.

Fixtures for unit tests - the note server is an in-memory fake served
through httpx.MockTransport. No test touches the network.
"""

import json
from itertools import count
from typing import Any

import httpx
import pytest

from noteapp.client.http import APIClient
from noteapp.client.service import HttpNoteService
from noteapp.store.note_store import NoteStore

BASE_URL = "http://notes.test:8080"


# =============================================================================
# Fake Note Server
# =============================================================================


class FakeNoteServer:
    """
    In-memory note server speaking the /notes JSON routes.

    Usage:
        server = FakeNoteServer()
        server.seed("Groceries", "milk")
        server.fail_with("GET", "/notes", 500)
        transport = httpx.MockTransport(server)
    """

    def __init__(self) -> None:
        self.notes: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._ids = count(1)
        self._failures: dict[tuple[str, str], int] = {}
        self._errors: dict[tuple[str, str], Exception] = {}

    def seed(self, title: str, description: str = "", created_at: str = "01-01-2026 00:00:00") -> str:
        note_id = str(next(self._ids))
        self.notes[note_id] = {
            "id": note_id,
            "noteTitle": title,
            "description": description,
            "createdAt": created_at,
        }
        return note_id

    def fail_with(self, method: str, path: str, status_code: int) -> None:
        self._failures[(method, path)] = status_code

    def raise_on(self, method: str, path: str, error: Exception) -> None:
        self._errors[(method, path)] = error

    def listing(self) -> list[dict[str, Any]]:
        return list(self.notes.values())

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self._errors:
            raise self._errors[key]
        if key in self._failures:
            return httpx.Response(self._failures[key], text="failure")

        path = request.url.path
        if path == "/notes":
            if request.method == "GET":
                return httpx.Response(200, json=self.listing())
            if request.method == "POST":
                body = json.loads(request.content)
                note_id = str(next(self._ids))
                self.notes[note_id] = {**body, "id": note_id}
                return httpx.Response(201, json=self.notes[note_id])
            return httpx.Response(405)

        if path.startswith("/notes/"):
            note_id = path.removeprefix("/notes/")
            if note_id not in self.notes:
                return httpx.Response(404, text="not found")
            if request.method == "GET":
                return httpx.Response(200, json=self.notes[note_id])
            if request.method == "PUT":
                self.notes[note_id] = {**json.loads(request.content), "id": note_id}
                return httpx.Response(200, text="updated")
            if request.method == "DELETE":
                del self.notes[note_id]
                return httpx.Response(200, text="deleted")
            return httpx.Response(405)

        return httpx.Response(404)


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def note_server() -> FakeNoteServer:
    """Empty fake note server."""
    return FakeNoteServer()


@pytest.fixture
def api_client(note_server: FakeNoteServer) -> APIClient:
    """APIClient wired to the fake server."""
    return APIClient(base_url=BASE_URL, timeout=5.0, transport=httpx.MockTransport(note_server))


@pytest.fixture
def note_service(api_client: APIClient) -> HttpNoteService:
    """HttpNoteService over the fake server."""
    return HttpNoteService(api_client)


@pytest.fixture
def store(note_service: HttpNoteService, fixed_clock) -> NoteStore:
    """NoteStore over the fake server with a fixed clock."""
    return NoteStore(note_service, clock=fixed_clock)
