"""Command-line note manager backed by git."""

__version__ = "0.3.0"

from notes.command_handler import Command, CommandHandler  # noqa: E402
from notes.config import Config  # noqa: E402
from notes.console_output import ConsoleOutput  # noqa: E402
from notes.errors import NotesError  # noqa: E402
from notes.models.note import MatchedLine, Note, RepositoryDir, SearchMatch  # noqa: E402

__all__ = [
    "Command",
    "CommandHandler",
    "Config",
    "ConsoleOutput",
    "MatchedLine",
    "Note",
    "NotesError",
    "RepositoryDir",
    "SearchMatch",
]
