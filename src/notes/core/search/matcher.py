"""Line-scan search engine: scoring and matched-line extraction."""

import re

from notes.models.note import MatchedLine, Note, SearchMatch

TITLE_SCORE = 4

# Lines shown after the title when only the title matched
TITLE_ONLY_CONTEXT_LINES = 6

_HAS_CONTENT = re.compile(r"\w", re.IGNORECASE)


def needle_pattern(needle: str) -> re.Pattern[str]:
    """Compile a user needle as a case-insensitive regex with one capture group.

    Raises re.error for an invalid expression.
    """
    return re.compile(f"({needle})", re.IGNORECASE)


def _has_content(line: str | None) -> bool:
    return line is not None and _HAS_CONTENT.search(line) is not None


def match_score(note: Note, pattern: re.Pattern[str]) -> int:
    """Score a note: 4 for a title match plus one per matching body line."""
    score = TITLE_SCORE if pattern.search(note.title) else 0
    score += sum(1 for line in note.body if pattern.search(line))
    return score


def _neighbor(raw: tuple[str, ...], idx: int) -> str | None:
    if 0 <= idx < len(raw) and _has_content(raw[idx]):
        return raw[idx]
    return None


def _title_only_lines(raw: tuple[str, ...], title_position: int) -> list[MatchedLine]:
    start = title_position + 1
    window = raw[start : start + TITLE_ONLY_CONTEXT_LINES]
    return [
        MatchedLine(
            display_number=idx + 1,
            line_number=idx,
            content=line,
            matched="",
        )
        for idx, line in enumerate(window, start=start)
        if _has_content(line)
    ]


def search_match(note: Note, pattern: re.Pattern[str]) -> SearchMatch:
    """Collect the lines of a note matching the pattern.

    Only lines after the title are examined. Each match carries the previous
    and next raw lines when they hold at least one word character; the
    previous line is never taken from index 0.

    When the note scores but no body line matched (the title alone matched),
    the first lines after the title are returned instead, without neighbors.
    """
    score = match_score(note, pattern)
    title_position = note.raw.index(note.title)

    matched_lines: list[MatchedLine] = []
    for idx in range(title_position + 1, len(note.raw)):
        line = note.raw[idx]
        found = pattern.search(line)
        if found is None:
            continue
        matched_lines.append(
            MatchedLine(
                display_number=idx + 1,
                line_number=idx,
                content=line,
                matched=found.group(1) or "",
                previous=_neighbor(note.raw, idx - 1) if idx > 1 else None,
                next=_neighbor(note.raw, idx + 1),
            )
        )

    if score > 0 and not matched_lines:
        matched_lines = _title_only_lines(note.raw, title_position)

    return SearchMatch(
        id=note.id,
        score=score,
        path=note.path,
        title=note.title,
        matched_lines=tuple(matched_lines),
    )


def search_notes(notes: list[Note], pattern: re.Pattern[str]) -> list[SearchMatch]:
    """Match every note and keep the scoring ones, best score first.

    Ties keep the order of the input notes.
    """
    matches = [search_match(note, pattern) for note in notes]
    matches = [m for m in matches if m.score > 0]
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches
