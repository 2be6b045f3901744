"""
CLI Client Module.

Terminal front-end for the note server, built with Typer and Rich.

Architecture:
- CLI is a thin presentation layer
- All state lives in NoteStore; commands only send UI events
- NoteStore calls the server via HTTP (httpx)

Usage:
    python cli.py --help
    python cli.py notes list
    python cli.py notes add -t Groceries
    python cli.py shell  # Interactive mode
"""
