"""Run shell commands inside the note store."""

import subprocess
from pathlib import Path

from loguru import logger

from notes.config import Config
from notes.errors import ExternalCommandError, NotesError
from notes.protocols import CommandOutput


def _failure_message(command: str, output: CommandOutput) -> str:
    lines = [f"Command '{command}' exited with code {output.status}"]
    if output.stdout.strip():
        lines.append(f"stdout: {output.stdout.strip()}")
    if output.stderr.strip():
        lines.append(f"stderr: {output.stderr.strip()}")
    return "\n".join(lines)


class ShellRunner:
    """Process launcher running `sh -c` commands.

    Commands run in the storage directory unless another directory is given.
    A nonzero exit status raises ExternalCommandError.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    def _cwd(self, cwd: Path | None) -> Path:
        return cwd if cwd is not None else self.config.storage_directory

    def run(self, command: str, cwd: Path | None = None) -> CommandOutput:
        """Run a command, capturing stdout and stderr."""
        directory = self._cwd(cwd)
        logger.debug("Running in {}: {}", directory, command)
        try:
            proc = subprocess.run(
                ["sh", "-c", command],
                cwd=directory,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            raise NotesError.wrap(exc) from exc

        output = CommandOutput(status=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
        if output.status != 0:
            raise ExternalCommandError(_failure_message(command, output), status=output.status)
        return output

    def run_interactive(self, command: str, cwd: Path | None = None) -> CommandOutput:
        """Run a command attached to the user's terminal."""
        directory = self._cwd(cwd)
        logger.debug("Running interactively in {}: {}", directory, command)
        try:
            proc = subprocess.run(["sh", "-c", command], cwd=directory)
        except OSError as exc:
            raise NotesError.wrap(exc) from exc

        if proc.returncode != 0:
            msg = f"Command '{command}' exited with code {proc.returncode}"
            raise ExternalCommandError(msg, status=proc.returncode)
        return CommandOutput(status=proc.returncode)
