"""Tests for the output bundle."""

from notes.console_output import ConsoleOutput
from notes.protocols import CommandOutput


def test_empty() -> None:
    out = ConsoleOutput.empty()
    assert (out.stdout, out.stderr) == ("", "")


def test_from_stdout_and_stderr() -> None:
    assert ConsoleOutput.from_stdout("test") == ConsoleOutput(stdout="test")
    assert ConsoleOutput.from_stderr("test") == ConsoleOutput(stderr="test")


def test_append() -> None:
    out_a = ConsoleOutput("out_a\n", "err_a\n")
    out_a.append(ConsoleOutput("out_b\n", "err_b\n"))
    assert out_a.stdout == "out_a\nout_b\n"
    assert out_a.stderr == "err_a\nerr_b\n"


def test_append_command_output() -> None:
    out = ConsoleOutput("out_a\n", "err_a\n")
    out.append_command_output(CommandOutput(2, "out_b\n", "err_b\n"))
    assert out.stdout == "out_a\nout_b\n"
    assert out.stderr == "err_a\nerr_b\n"


def test_append_stdout() -> None:
    out = ConsoleOutput("out_a\n", "err_a\n")
    out.append_stdout("test\n")
    assert out.stdout == "out_a\ntest\n"
    assert out.stderr == "err_a\n"


def test_from_command_output() -> None:
    out = ConsoleOutput.from_command_output(CommandOutput(2, "out_b\n", "err_b\n"))
    assert out == ConsoleOutput("out_b\n", "err_b\n")
