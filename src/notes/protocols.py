"""Protocols for dependency injection of external collaborators."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from notes.console_output import ConsoleOutput
    from notes.models.note import Note, RepositoryDir


@dataclass(frozen=True)
class CommandOutput:
    """Exit status and captured streams of a finished process."""

    status: int = 0
    stdout: str = ""
    stderr: str = ""


@runtime_checkable
class ShellProtocol(Protocol):
    """Protocol for process launchers."""

    def run(self, command: str, cwd: Path | None = None) -> CommandOutput:
        """Run a shell command with captured output, raising on failure."""
        ...

    def run_interactive(self, command: str, cwd: Path | None = None) -> CommandOutput:
        """Run a shell command attached to the terminal, raising on failure."""
        ...


@runtime_checkable
class GitProtocol(Protocol):
    """Protocol for version-control drivers."""

    def init(self) -> "ConsoleOutput":
        """Create a repository in the storage directory."""
        ...

    def commit(self, note: "Note", message: str) -> "ConsoleOutput":
        """Stage the note's path and commit it."""
        ...

    def has_changed(self, note: "Note") -> bool:
        """Whether the note's file differs from HEAD."""
        ...

    def push(self) -> "ConsoleOutput":
        """Push the repository."""
        ...

    def pull(self) -> "ConsoleOutput":
        """Pull the repository."""
        ...


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Protocol for note stores used by the command handler."""

    def init(self) -> "ConsoleOutput": ...

    def new_note(self, note_id: int, partial_path: str) -> "Note": ...

    def edit_note(self, note: "Note") -> "ConsoleOutput": ...

    def delete_note(self, note: "Note") -> "ConsoleOutput": ...

    def find_note_by_id(self, note_id: int) -> "Note | None": ...

    def load_repository_tree(self) -> list["RepositoryDir"]: ...

    def load_notes(self) -> list["Note"]: ...

    def push_repo(self) -> "ConsoleOutput": ...

    def pull_repo(self) -> "ConsoleOutput": ...
