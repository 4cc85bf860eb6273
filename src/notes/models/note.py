"""Domain models for the note store."""

from dataclasses import dataclass
from pathlib import Path

from notes.errors import NoteParseError


@dataclass(frozen=True)
class Note:
    """A markdown note parsed into title, body and raw lines."""

    id: int
    path: Path
    title: str
    # Non-empty lines, title excluded
    body: tuple[str, ...]
    # Every line of the file, empty ones included
    raw: tuple[str, ...]

    @classmethod
    def from_content(cls, note_id: int, path: Path, raw_content: str) -> "Note":
        """Parse note text.

        The title is the first non-empty line. Raises NoteParseError when the
        text holds no non-empty line at all.
        """
        raw = tuple(raw_content.split("\n"))
        non_empty = [line for line in raw if line != ""]
        if not non_empty:
            msg = "Not enough lines"
            raise NoteParseError(msg)

        return cls(
            id=note_id,
            path=Path(path),
            title=non_empty[0],
            body=tuple(non_empty[1:]),
            raw=raw,
        )

    @classmethod
    def from_file(cls, note_id: int, path: Path) -> "Note":
        """Read and parse a note file."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise NoteParseError.wrap(exc) from exc
        return cls.from_content(note_id, path, content)

    def content(self) -> str:
        return "\n".join(self.raw)


@dataclass(frozen=True)
class MatchedLine:
    """A note line reported by a search, with its neighbors."""

    display_number: int
    line_number: int
    content: str
    matched: str
    previous: str | None = None
    next: str | None = None


@dataclass(frozen=True)
class SearchMatch:
    """Search result for one note."""

    id: int
    score: int
    path: Path
    title: str
    matched_lines: tuple[MatchedLine, ...] = ()


@dataclass(frozen=True)
class RepositoryDir:
    """A directory of the store with the notes it directly contains."""

    name: str
    path: Path
    notes: tuple[Note, ...]
    level: int
