"""End-to-end tests running the CLI against a real git repository."""

import shutil
import subprocess
from pathlib import Path

import pytest
from typer.testing import CliRunner

from notes.cli import app
from notes.config import STORAGE_DIRECTORY_ENV

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

EDIT_MARKER = "### File was just edited ###"

runner = CliRunner()


@pytest.fixture
def storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh storage directory, an isolated git identity and a scripted editor."""
    editor = tmp_path / "editor.sh"
    editor.write_text(f"#!/bin/sh\nprintf '%s\\n' '{EDIT_MARKER}' >> \"$1\"\n")
    editor.chmod(0o755)

    git_config = tmp_path / "gitconfig"
    git_config.write_text("")

    storage = tmp_path / "notes"
    monkeypatch.setenv("EDITOR", str(editor))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Notes Tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "notes@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Notes Tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "notes@example.com")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(git_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv(STORAGE_DIRECTORY_ENV, str(storage))
    return storage


def _git_log(storage: Path) -> list[str]:
    proc = subprocess.run(
        ["git", "log", "--format=%s"],
        cwd=storage,
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout.splitlines()


def test_note_lifecycle(storage: Path) -> None:
    result = runner.invoke(app, ["new", "first-idea"])
    assert result.exit_code == 0, result.output
    note = storage / "first-idea.md"
    assert f"Note '{note}' created" in result.output
    assert note.read_text() == f"# Note template\n\nHere we go !\n\n{EDIT_MARKER}\n"
    assert _git_log(storage) == ["Update note first-idea.md", "Create note template"]

    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert f" 🗁  {storage}\n" in result.output
    assert "@1 - # Note template" in result.output
    assert "@2 - # Note template" in result.output

    result = runner.invoke(app, ["search", "edited"])
    assert result.exit_code == 0, result.output
    assert "@2 # Note template (Score: 1)" in result.output
    assert EDIT_MARKER in result.output
    assert "1 results found for 'edited'" in result.output

    result = runner.invoke(app, ["delete", "2"])
    assert result.exit_code == 0, result.output
    assert not note.exists()
    assert _git_log(storage)[0] == "Delete note first-idea.md"


def test_edit_without_change_does_not_commit(
    storage: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert _git_log(storage) == ["Create note template"]

    monkeypatch.setenv("EDITOR", "true")
    result = runner.invoke(app, ["edit", "1"])
    assert result.exit_code == 0, result.output
    assert _git_log(storage) == ["Create note template"]


def test_failing_editor_reports_error(storage: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDITOR", "false")
    result = runner.invoke(app, ["edit", "1"])
    assert result.exit_code == 1
    assert "exited with code 1" in result.output
