"""Dispatch parsed commands to the note repository."""

import re
from dataclasses import dataclass

import notes
from notes.config import NOTE_SUFFIX
from notes.console_output import ConsoleOutput
from notes.core.format import CliFormat
from notes.core.search.matcher import needle_pattern, search_notes
from notes.errors import NoteNotFoundError, UserInputError
from notes.models.note import Note
from notes.protocols import RepositoryProtocol
from notes.usage import usage


@dataclass(frozen=True)
class NewCommand:
    path: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class SearchCommand:
    needle: str


@dataclass(frozen=True)
class EditCommand:
    id: int


@dataclass(frozen=True)
class DeleteCommand:
    id: int


@dataclass(frozen=True)
class PushCommand:
    pass


@dataclass(frozen=True)
class PullCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    pass


Command = (
    NewCommand
    | ListCommand
    | SearchCommand
    | EditCommand
    | DeleteCommand
    | PushCommand
    | PullCommand
    | HelpCommand
)


class CommandHandler:
    """Run one command and collect what it prints."""

    def __init__(self, repository: RepositoryProtocol, formatter: CliFormat) -> None:
        self.repository = repository
        self.formatter = formatter

    def apply_command(self, command: Command) -> ConsoleOutput:
        if isinstance(command, NewCommand):
            return self.new_note(command.path)
        if isinstance(command, ListCommand):
            return self.list_notes()
        if isinstance(command, SearchCommand):
            return self.search(command.needle)
        if isinstance(command, EditCommand):
            return self.edit_note(command.id)
        if isinstance(command, DeleteCommand):
            return self.delete_note(command.id)
        if isinstance(command, PushCommand):
            return self.push_repo()
        if isinstance(command, PullCommand):
            return self.pull_repo()
        if isinstance(command, HelpCommand):
            return self.help()
        msg = f"Unknown command: {command!r}"
        raise TypeError(msg)

    def new_note(self, path: str) -> ConsoleOutput:
        """Create a note from the template, then open it for editing."""
        final_path = path if path.endswith(NOTE_SUFFIX) else f"{path}{NOTE_SUFFIX}"
        note_id = len(self.repository.load_notes()) + 1
        note = self.repository.new_note(note_id, final_path)

        out = self.repository.edit_note(note)
        out.append_stdout(f"\nNote '{note.path}' created\n")
        return out

    def list_notes(self) -> ConsoleOutput:
        out = ConsoleOutput.empty()
        for entry in self.repository.load_repository_tree():
            pad = "  " * entry.level
            out.append_stdout(f"{pad}{self.formatter.note_directory(entry.name)}\n")
            for note in entry.notes:
                out.append_stdout(f"{pad}{self.formatter.note_list_item(note)}\n")
            out.append_stdout("\n")
        return out

    def search(self, needle: str) -> ConsoleOutput:
        """Rank every note against the needle, best score first."""
        try:
            pattern = needle_pattern(needle)
        except re.error as exc:
            msg = f"Invalid search pattern '{needle}': {exc}"
            raise UserInputError(msg) from exc

        matches = search_notes(self.repository.load_notes(), pattern)

        out = ConsoleOutput.empty()
        for match in matches:
            out.append_stdout(f"{self.formatter.search_match(match)}\n\n")
        out.append_stdout(f"{len(matches)} results found for '{needle}'\n")
        return out

    def _find_note(self, note_id: int) -> Note:
        note = self.repository.find_note_by_id(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return note

    def edit_note(self, note_id: int) -> ConsoleOutput:
        return self.repository.edit_note(self._find_note(note_id))

    def delete_note(self, note_id: int) -> ConsoleOutput:
        return self.repository.delete_note(self._find_note(note_id))

    def push_repo(self) -> ConsoleOutput:
        out = ConsoleOutput.from_stdout(f"{self.formatter.banner()}\n")
        out.append(self.repository.push_repo())
        return out

    def pull_repo(self) -> ConsoleOutput:
        out = ConsoleOutput.from_stdout(f"{self.formatter.banner()}\n")
        out.append(self.repository.pull_repo())
        return out

    def help(self) -> ConsoleOutput:
        return ConsoleOutput.from_stdout(f"{self.formatter.banner()}\n{usage(notes.__version__)}")
