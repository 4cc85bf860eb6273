"""Tests for storage directory resolution."""

from pathlib import Path

import pytest

from notes.config import STORAGE_DIRECTORY_ENV, Config


def test_path_from_environment() -> None:
    config = Config.from_env({STORAGE_DIRECTORY_ENV: "/path/to/dir"})
    assert config.storage_directory == Path("/path/to/dir")
    assert config.template_path == Path("/path/to/dir/.template.md")


def test_path_from_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    config = Config.from_env({})
    assert config.storage_directory == tmp_path / ".notes"


def test_empty_variable_falls_back_to_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    config = Config.from_env({STORAGE_DIRECTORY_ENV: ""})
    assert config.storage_directory == tmp_path / ".notes"


def test_path_without_home(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", no_home)
    config = Config.from_env({})
    assert config.storage_directory == Path("/tmp/.notes")


def test_from_env_reads_process_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(STORAGE_DIRECTORY_ENV, str(tmp_path))
    assert Config.from_env().storage_directory == tmp_path


def test_from_path_normalizes(tmp_path: Path) -> None:
    config = Config.from_path(tmp_path / "a" / ".." / "b")
    assert config.storage_directory == tmp_path / "b"
