"""
Note Client.

Client library and view-model for a remote note-taking service.

Layers:
- domain/schemas: Note and its wire record, with a lossless mapping
- client: HTTP adapter for the five note endpoints
- store: observable view-model state driven by UI events
- cli: terminal front-end over the store
"""
