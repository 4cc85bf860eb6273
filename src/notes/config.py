"""Configuration for the note store."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

STORAGE_DIRECTORY_ENV = "NOTES_STORAGE_DIRECTORY"

# Storage root when the environment does not name one.
DEFAULT_STORAGE_NAME = ".notes"
FALLBACK_HOME = Path("/tmp")

TEMPLATE_NAME = ".template.md"
TEMPLATE_CONTENT = "# Note template\n\nHere we go !\n\n"

# Path substrings never enumerated as notes or note directories.
IGNORED_PATHS: tuple[str, ...] = (".git", ".idea")

NOTE_SUFFIX = ".md"


def _home_directory() -> Path:
    try:
        home = Path.home()
    except RuntimeError:
        return FALLBACK_HOME
    # Older interpreters hand back "~" unexpanded when no home is known
    return FALLBACK_HOME if str(home) == "~" else home


@dataclass(frozen=True)
class Config:
    """Where notes and the note template live."""

    storage_directory: Path
    template_path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> "Config":
        storage_directory = Path(os.path.abspath(Path(path).expanduser()))
        return cls(
            storage_directory=storage_directory,
            template_path=storage_directory / TEMPLATE_NAME,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Resolve the storage root from NOTES_STORAGE_DIRECTORY, else ~/.notes."""
        env = os.environ if environ is None else environ
        configured = env.get(STORAGE_DIRECTORY_ENV)
        if configured:
            return cls.from_path(Path(configured).expanduser())
        return cls.from_path(_home_directory() / DEFAULT_STORAGE_NAME)
