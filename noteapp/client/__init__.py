"""
Note Client Package.

HTTP adapter for the remote note server.

Usage:
    from noteapp.client import APIClient, HttpNoteService

    service = HttpNoteService(APIClient())
    result = await service.get_all_notes()
"""

from noteapp.client.http import APIClient, close_api_client, get_api_client
from noteapp.client.result import Failure, Result, Success
from noteapp.client.service import Endpoints, HttpNoteService, NoteService

__all__ = [
    "APIClient",
    "Endpoints",
    "Failure",
    "HttpNoteService",
    "NoteService",
    "Result",
    "Success",
    "close_api_client",
    "get_api_client",
]
