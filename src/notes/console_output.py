"""Output bundle returned by commands and printed by the CLI."""

from dataclasses import dataclass

from notes.protocols import CommandOutput


@dataclass
class ConsoleOutput:
    """Text destined for stdout and stderr."""

    stdout: str = ""
    stderr: str = ""

    @classmethod
    def empty(cls) -> "ConsoleOutput":
        return cls()

    @classmethod
    def from_stdout(cls, out: str) -> "ConsoleOutput":
        return cls(stdout=out)

    @classmethod
    def from_stderr(cls, err: str) -> "ConsoleOutput":
        return cls(stderr=err)

    @classmethod
    def from_command_output(cls, output: CommandOutput) -> "ConsoleOutput":
        return cls(stdout=output.stdout, stderr=output.stderr)

    def append(self, other: "ConsoleOutput") -> None:
        self.stdout += other.stdout
        self.stderr += other.stderr

    def append_command_output(self, output: CommandOutput) -> None:
        self.stdout += output.stdout
        self.stderr += output.stderr

    def append_stdout(self, out: str) -> None:
        self.stdout += out
