"""Shared test fixtures."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from notes.config import TEMPLATE_CONTENT, Config
from notes.core.tree.repository import NoteRepository
from tests.unit.fakes import FakeGit, FakeShell

# Relative paths of the notes in the sample store, in id order after the template.
SAMPLE_NOTES = [
    "a.md",
    "b.md",
    "a/aa.md",
    "a/ab.md",
    "a/a/aaa.md",
    "a/a/aab.md",
    "b/bb.md",
]


def sample_note_content(rel: str) -> str:
    return f"# {rel}\n\nContent of {rel}\n"


@pytest.fixture(autouse=True)
def _loguru_to_stderr() -> Iterator[None]:
    """Route loguru to the stderr captured for the current test."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG", format="{level.icon} {message}")
    yield
    logger.remove()


@pytest.fixture
def sample_config(tmp_path: Path) -> Config:
    """A storage directory holding the template, seven notes and files to skip."""
    storage = tmp_path / "storage"
    storage.mkdir()
    config = Config.from_path(storage)
    config.template_path.write_text(TEMPLATE_CONTENT)

    for rel in SAMPLE_NOTES:
        path = storage / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(sample_note_content(rel))

    # Not notes: empty file, other suffix, ignored directories
    (storage / "c-empty.md").write_text("\n\n")
    (storage / "readme.txt").write_text("# Not a note\n")
    (storage / ".git").mkdir()
    (storage / ".git" / "HEAD.md").write_text("# git internals\n")
    (storage / ".idea").mkdir()
    (storage / ".idea" / "workspace.md").write_text("# ide settings\n")
    return config


@pytest.fixture
def fake_shell() -> FakeShell:
    return FakeShell()


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def sample_repository(
    sample_config: Config, fake_shell: FakeShell, fake_git: FakeGit
) -> NoteRepository:
    return NoteRepository(sample_config, fake_shell, fake_git)
