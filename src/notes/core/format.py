"""Render search matches and tree listings for the terminal."""

from typing import Any

import typer

from notes.banners import BIG_BANNER
from notes.models.note import MatchedLine, Note, SearchMatch

EMPTY_NOTE = "... This note is empty ..."


class CliFormat:
    """Terminal formatting of notes and search results.

    With color=False every method returns plain text.
    """

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _style(self, text: str, **styles: Any) -> str:
        return typer.style(text, **styles) if self.color else text

    def note_id(self, note_id: int) -> str:
        return self._style(f"@{note_id}", fg=typer.colors.GREEN)

    def note_title(self, title: str) -> str:
        return self._style(title, fg=typer.colors.CYAN)

    def match_score(self, score: int) -> str:
        return self._style(f"(Score: {score})", dim=True)

    def note_directory(self, name: str) -> str:
        return f" 🗁  {name}"

    def note_list_item(self, note: Note) -> str:
        return f" {self.note_id(note.id)} - {self.note_title(note.title)}"

    def banner(self) -> str:
        return self._style(BIG_BANNER, fg=typer.colors.GREEN)

    def _matched_line(self, line: MatchedLine, *, is_last: bool) -> str:
        content = line.content
        if line.matched:
            highlighted = self._style(line.matched, fg=typer.colors.YELLOW)
            content = content.replace(line.matched, highlighted)

        rows: list[str] = []
        if line.previous is not None:
            number = self._style(f"{line.display_number - 1}.", dim=True)
            rows.append(f"{number} {self._style(line.previous, dim=True)}")
        rows.append(f"{self._style(f'{line.display_number}.', dim=True)} {content}")
        if line.next is not None:
            number = self._style(f"{line.display_number + 1}.", dim=True)
            rows.append(f"{number} {self._style(line.next, dim=True)}")

        rendered = "\n".join(rows)
        # Entries with context are followed by a blank line
        has_context = line.previous is not None or line.next is not None
        if has_context and not is_last:
            rendered += "\n"
        return rendered

    def search_match(self, match: SearchMatch) -> str:
        """Render a header line then each matched line with its context."""
        header = (
            f"{self.note_id(match.id)} {self.note_title(match.title)} "
            f"{self.match_score(match.score)} \n"
        )
        total = len(match.matched_lines)
        body = [
            self._matched_line(line, is_last=index == total - 1)
            for index, line in enumerate(match.matched_lines)
        ]
        if not body:
            body = [EMPTY_NOTE]
        return header + "\n".join(body)
