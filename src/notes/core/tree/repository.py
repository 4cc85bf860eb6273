"""Note store on disk: tree enumeration, id assignment and file operations."""

import os
import shlex
import shutil
from pathlib import Path

from loguru import logger

from notes.config import IGNORED_PATHS, NOTE_SUFFIX, TEMPLATE_CONTENT, Config
from notes.console_output import ConsoleOutput
from notes.errors import AlreadyExistsError, NoteParseError, NotesError, UserInputError
from notes.models.note import Note, RepositoryDir
from notes.protocols import GitProtocol, ShellProtocol


class NoteRepository:
    """Notes stored as markdown files in a git-backed directory tree.

    Note ids are positions in a deterministic walk of the tree: directories
    depth-first with siblings sorted by name, and within each directory the
    note files sorted by name. The first note gets id 1. Ids are not
    persisted, so they shift when files are added, renamed or removed.
    """

    def __init__(
        self,
        config: Config,
        shell: ShellProtocol,
        git: GitProtocol,
        *,
        ignored_paths: tuple[str, ...] = IGNORED_PATHS,
    ) -> None:
        self.config = config
        self.shell = shell
        self.git = git
        self.ignored_paths = ignored_paths

    def _is_ignored(self, path: str | Path) -> bool:
        path_str = str(path)
        return any(ignored in path_str for ignored in self.ignored_paths)

    def init(self) -> ConsoleOutput:
        """Create the store, its git repository and the note template if missing."""
        out = ConsoleOutput.empty()
        if self.config.template_path.exists():
            return out

        logger.info("Initializing note repository in {}", self.config.storage_directory)
        try:
            self.config.storage_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise NotesError.wrap(exc) from exc
        out.append(self.git.init())

        template = Note.from_content(0, self.config.template_path, TEMPLATE_CONTENT)
        try:
            template.path.write_text(template.content(), encoding="utf-8")
        except OSError as exc:
            raise NotesError.wrap(exc) from exc
        out.append(self.git.commit(template, "Create note template"))
        return out

    def _note_path(self, partial_path: str) -> Path:
        storage = self.config.storage_directory
        path = Path(os.path.normpath(storage / partial_path))
        if path == storage or not path.is_relative_to(storage):
            msg = f"Path escapes storage directory: {partial_path!r}"
            raise UserInputError(msg)
        return path

    def new_note(self, note_id: int, partial_path: str) -> Note:
        """Copy the template to a new file below the storage directory."""
        path = self._note_path(partial_path)
        if path.exists():
            msg = f"Already exists: {path}"
            raise AlreadyExistsError(msg)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.config.template_path, path)
        except OSError as exc:
            raise NotesError.wrap(exc) from exc

        logger.debug("Created {} from template", path)
        return Note.from_file(note_id, path)

    def edit_note(self, note: Note) -> ConsoleOutput:
        """Open the note in $EDITOR and commit it if it changed."""
        out = ConsoleOutput.empty()
        self.shell.run_interactive(f"$EDITOR {shlex.quote(str(note.path))}")
        if self.git.has_changed(note):
            out.append(self.git.commit(note, f"Update note {note.path.name}"))
        else:
            logger.debug("{} unchanged, not committing", note.path)
        return out

    def delete_note(self, note: Note) -> ConsoleOutput:
        try:
            note.path.unlink()
        except OSError as exc:
            raise NotesError.wrap(exc) from exc
        return self.git.commit(note, f"Delete note {note.path.name}")

    def find_note_by_id(self, note_id: int) -> Note | None:
        notes = self.load_notes()
        if 1 <= note_id <= len(notes):
            return notes[note_id - 1]
        return None

    def _walk_directories(self) -> list[Path]:
        root = self.config.storage_directory
        directories: list[Path] = []
        for dirpath, dirnames, _filenames in os.walk(root):
            if self._is_ignored(dirpath):
                dirnames.clear()
                continue
            # Sorting in place makes os.walk visit siblings in name order.
            dirnames.sort()
            directories.append(Path(dirpath))
        return directories

    def _note_files(self, directory: Path) -> list[Path]:
        try:
            children = sorted(directory.iterdir())
        except OSError:
            logger.debug("Cannot list {}, skipping", directory)
            return []
        return [
            child
            for child in children
            if child.name.endswith(NOTE_SUFFIX) and not self._is_ignored(child)
        ]

    def load_repository_tree(self) -> list[RepositoryDir]:
        """Enumerate note directories in display order, assigning note ids."""
        root = self.config.storage_directory
        root_level = len(root.parts)
        current_id = 0

        tree: list[RepositoryDir] = []
        for directory in self._walk_directories():
            dir_notes: list[Note] = []
            for path in self._note_files(directory):
                try:
                    note = Note.from_file(current_id + 1, path)
                except NoteParseError as exc:
                    logger.debug("Skipping {}: {}", path, exc)
                    continue
                current_id += 1
                dir_notes.append(note)

            name = str(directory.relative_to(root))
            # The storage root itself is shown by its full path
            if name == ".":
                name = str(root)

            tree.append(
                RepositoryDir(
                    name=name,
                    path=directory,
                    notes=tuple(dir_notes),
                    level=len(directory.parts) - root_level,
                )
            )
        return tree

    def load_notes(self) -> list[Note]:
        return [note for directory in self.load_repository_tree() for note in directory.notes]

    def push_repo(self) -> ConsoleOutput:
        return self.git.push()

    def pull_repo(self) -> ConsoleOutput:
        return self.git.pull()
