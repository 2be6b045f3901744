"""Unit tests for CLI commands."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli import app

runner = CliRunner()


@pytest.fixture
def patched_store(store):
    """Make every command use the store wired to the fake server."""
    with patch("noteapp.cli.commands.notes.build_store", return_value=store):
        yield store


class TestNoteCommands:
    """Tests for the notes command group."""

    def test_list_shows_notes(self, patched_store, note_server) -> None:
        note_server.seed("Groceries", "milk")

        result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == 0
        assert "Groceries" in result.stdout

    def test_list_empty(self, patched_store) -> None:
        result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == 0
        assert "No notes yet" in result.stdout

    def test_list_server_error_exits_1(self, patched_store, note_server) -> None:
        note_server.fail_with("GET", "/notes", 503)

        result = runner.invoke(app, ["notes", "list"])

        assert result.exit_code == 1
        assert "HTTP status code: 503" in result.stdout

    def test_show(self, patched_store, note_server) -> None:
        note_id = note_server.seed("Pick me", "body text")

        result = runner.invoke(app, ["notes", "show", note_id])

        assert result.exit_code == 0
        assert "Pick me" in result.stdout
        assert "body text" in result.stdout

    def test_add(self, patched_store, note_server) -> None:
        result = runner.invoke(app, ["notes", "add", "-t", "Groceries"])

        assert result.exit_code == 0
        assert "Note added" in result.stdout
        assert [n["noteTitle"] for n in note_server.listing()] == ["Groceries"]

    def test_add_blank_is_rejected(self, patched_store, note_server) -> None:
        result = runner.invoke(app, ["notes", "add"])

        assert result.exit_code == 1
        assert "shouldn't be" in result.stdout
        assert note_server.requests == []

    def test_add_failure_is_not_hidden_by_refresh(self, patched_store, note_server) -> None:
        note_server.fail_with("POST", "/notes", 500)

        result = runner.invoke(app, ["notes", "add", "-t", "Doomed"])

        assert result.exit_code == 1
        assert "HTTP status code: 500" in result.stdout

    def test_edit_keeps_unspecified_fields(self, patched_store, note_server) -> None:
        note_id = note_server.seed("Old", "keep me")

        result = runner.invoke(app, ["notes", "edit", note_id, "-t", "New"])

        assert result.exit_code == 0
        assert note_server.notes[note_id]["noteTitle"] == "New"
        assert note_server.notes[note_id]["description"] == "keep me"

    def test_edit_missing_note(self, patched_store) -> None:
        result = runner.invoke(app, ["notes", "edit", "404", "-t", "New"])

        assert result.exit_code == 1
        assert "HTTP status code: 404" in result.stdout

    def test_delete(self, patched_store, note_server) -> None:
        note_id = note_server.seed("Gone")

        result = runner.invoke(app, ["notes", "delete", note_id])

        assert result.exit_code == 0
        assert note_server.listing() == []


class TestMainApp:
    """Tests for main app options."""

    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Note Client CLI" in result.stdout

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Note Client v1.0.0" in result.stdout

    def test_debug_flag(self) -> None:
        result = runner.invoke(app, ["--debug", "version"])
        assert result.exit_code == 0
        assert "Debug mode enabled" in result.stdout

    def test_shell_help(self) -> None:
        result = runner.invoke(app, ["shell", "--help"])
        assert result.exit_code == 0

    def test_outside_project_tree_exits_with_message(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 1
        assert "Project root not found" in result.output
        assert "Note Client v" not in result.output
