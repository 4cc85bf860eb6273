"""Error types reported to the user."""

import traceback


class NotesError(Exception):
    """Base error: a message for the user plus an optional backtrace."""

    def __init__(self, message: str, *, backtrace: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.backtrace = backtrace

    def __str__(self) -> str:
        return self.message

    @classmethod
    def wrap(cls, exc: OSError | ValueError) -> "NotesError":
        """Convert an I/O or integer-parsing error, keeping its traceback."""
        backtrace = "".join(traceback.format_exception(exc)).rstrip("\n")
        return cls(str(exc), backtrace=backtrace)


class UserInputError(NotesError):
    """Bad command, missing argument or unparseable integer."""


class NoteNotFoundError(NotesError):
    """No note has the requested id."""

    def __init__(self, note_id: int) -> None:
        super().__init__(f"Note with id {note_id} not found.")
        self.note_id = note_id


class AlreadyExistsError(NotesError):
    """A new note would overwrite an existing file."""


class NoteParseError(NotesError):
    """A file could not be parsed as a note."""


class ExternalCommandError(NotesError):
    """A subprocess exited with a nonzero status."""

    def __init__(self, message: str, *, status: int) -> None:
        super().__init__(message)
        self.status = status
