"""Git driver for the note store."""

import shlex

from loguru import logger

from notes.console_output import ConsoleOutput
from notes.errors import ExternalCommandError
from notes.models.note import Note
from notes.protocols import ShellProtocol


class GitDriver:
    """Version-control operations, run through a process launcher."""

    def __init__(self, shell: ShellProtocol) -> None:
        self.shell = shell

    def init(self) -> ConsoleOutput:
        return ConsoleOutput.from_command_output(self.shell.run("git init"))

    def commit(self, note: Note, message: str) -> ConsoleOutput:
        """Stage only the note's path, then commit it."""
        path = shlex.quote(str(note.path))
        out = ConsoleOutput.empty()
        out.append_command_output(self.shell.run(f"git add {path}"))
        out.append_command_output(
            self.shell.run(f"git commit -m {shlex.quote(message)} -- {path}")
        )
        logger.debug("Committed {}: {}", note.path, message)
        return out

    def has_changed(self, note: Note) -> bool:
        """Whether the working tree differs from HEAD for the note's path."""
        path = shlex.quote(str(note.path))
        try:
            self.shell.run(f"git add {path} && git diff --exit-code HEAD -- {path} > /dev/null")
        except ExternalCommandError:
            return True
        return False

    def push(self) -> ConsoleOutput:
        return ConsoleOutput.from_command_output(self.shell.run_interactive("git push"))

    def pull(self) -> ConsoleOutput:
        return ConsoleOutput.from_command_output(self.shell.run_interactive("git pull"))
