"""Command-line interface for the note manager."""

from pathlib import Path
from typing import Annotated, NoReturn

import typer
from loguru import logger
from typer.core import TyperCommand, TyperGroup

from notes import __version__
from notes.banners import SMALL_BANNER
from notes.command_handler import (
    Command,
    CommandHandler,
    DeleteCommand,
    EditCommand,
    HelpCommand,
    ListCommand,
    NewCommand,
    PullCommand,
    PushCommand,
    SearchCommand,
)
from notes.config import Config
from notes.console_output import ConsoleOutput
from notes.core.format import CliFormat
from notes.core.tree.repository import NoteRepository
from notes.errors import NotesError, UserInputError
from notes.git import GitDriver
from notes.logging_config import configure_logging
from notes.shell import ShellRunner

BAD_COMMAND = "Bad command, try: $ notes help"

COMMAND_ALIASES = {
    "n": "new",
    "l": "list",
    "s": "search",
    "e": "edit",
    "d": "delete",
    "p": "push",
    "ll": "pull",
    "h": "help",
}


def print_output(output: ConsoleOutput) -> None:
    if output.stdout:
        typer.echo(output.stdout, nl=False)
    if output.stderr:
        typer.echo(output.stderr, err=True, nl=False)


def fail(error: NotesError) -> NoReturn:
    """Print an error on stderr and exit with status 1."""
    message = typer.style(error.message, fg=typer.colors.RED)
    print_output(ConsoleOutput.from_stderr(f"{message}\n"))
    if error.backtrace:
        logger.debug(error.backtrace)
    raise typer.Exit(1)


class AliasedGroup(TyperGroup):
    """Command group resolving single-letter shortcuts to subcommands."""

    def get_command(
        self, ctx: typer.Context, cmd_name: str
    ) -> TyperCommand | TyperGroup | None:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, TyperCommand | TyperGroup | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            fail(UserInputError(BAD_COMMAND))
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=AliasedGroup,
    help="Notes: keep markdown notes in a git repository.",
    add_completion=False,
)


def build_repository(config: Config) -> NoteRepository:
    shell = ShellRunner(config)
    return NoteRepository(config, shell, GitDriver(shell))


def run_command(config: Config, command: Command) -> None:
    """Initialize the store if needed, apply one command and print its output."""
    repository = build_repository(config)
    try:
        init_output = repository.init()
        if init_output.stdout or init_output.stderr:
            logger.debug("init: {}{}", init_output.stdout, init_output.stderr)
        output = CommandHandler(repository, CliFormat()).apply_command(command)
    except NotesError as error:
        fail(error)
    print_output(output)


def _parse_id(value: str | None) -> int:
    if value is None:
        fail(UserInputError("You must specify a note id"))
    try:
        return int(value)
    except ValueError as exc:
        fail(UserInputError.wrap(exc))


def _config(ctx: typer.Context) -> Config:
    config: Config = ctx.obj
    return config


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    storage_dir: Annotated[
        Path | None,
        typer.Option("--storage-dir", help="Note storage directory (git root)"),
    ] = None,
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    configure_logging(verbose=verbose)
    if version:
        typer.echo(__version__)
        raise typer.Exit()
    typer.echo(SMALL_BANNER, nl=False)
    if ctx.invoked_subcommand is None:
        fail(UserInputError(BAD_COMMAND))
    ctx.obj = Config.from_path(storage_dir) if storage_dir else Config.from_env()
    logger.debug("Storage directory: {}", ctx.obj.storage_directory)


@app.command()
def new(
    ctx: typer.Context,
    path: Annotated[str | None, typer.Argument(help="The note path, without .md")] = None,
) -> None:
    """Create a new note. (alias: n)"""
    if path is None:
        fail(UserInputError("You must specify a title"))
    run_command(_config(ctx), NewCommand(path=path))


@app.command(name="list")
def list_cmd(ctx: typer.Context) -> None:
    """List all notes from repository. (alias: l)"""
    run_command(_config(ctx), ListCommand())


@app.command()
def search(
    ctx: typer.Context,
    needle: Annotated[
        str | None,
        typer.Argument(help="The pattern to search. You can use regular expressions"),
    ] = None,
) -> None:
    """Search in all notes. (alias: s)"""
    if needle is None:
        fail(UserInputError("You must specify something to search"))
    run_command(_config(ctx), SearchCommand(needle=needle))


@app.command()
def edit(
    ctx: typer.Context,
    note_id: Annotated[
        str | None, typer.Argument(metavar="ID", help="The id of the note to edit")
    ] = None,
) -> None:
    """Edit a note with $EDITOR. (alias: e)"""
    run_command(_config(ctx), EditCommand(id=_parse_id(note_id)))


@app.command()
def delete(
    ctx: typer.Context,
    note_id: Annotated[
        str | None, typer.Argument(metavar="ID", help="The id of the note to delete")
    ] = None,
) -> None:
    """Delete a note from repository. (alias: d)"""
    run_command(_config(ctx), DeleteCommand(id=_parse_id(note_id)))


@app.command()
def push(ctx: typer.Context) -> None:
    """Push note repository. (alias: p)"""
    run_command(_config(ctx), PushCommand())


@app.command()
def pull(ctx: typer.Context) -> None:
    """Pull note repository. (alias: ll)"""
    run_command(_config(ctx), PullCommand())


@app.command(name="help")
def help_cmd(ctx: typer.Context) -> None:
    """Show help. (alias: h)"""
    run_command(_config(ctx), HelpCommand())


def main() -> None:
    app()
