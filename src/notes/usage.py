"""Usage text shown by `notes help`."""

USAGE = """
Usage:

  notes new <path>          Create a new note.
  notes search <needle>     Search for a note. You can use regex !
  notes edit <id>           Edit specified note
  notes delete <id>         Delete specified note
  notes list                List all notes
  notes push                Push notes repository
  notes pull                Pull notes repository
  notes help                Show this help

Options:
  -v --verbose        Print debug messages and error backtraces.
  --storage-dir DIR   Use DIR instead of $NOTES_STORAGE_DIRECTORY or ~/.notes.
  --help              Show this screen.
  --version           Show version.

Examples:

    $ notes new my-awesome-idea
    $ notes list
    $ notes search 'rsync|ssh'
    $ notes edit 123
    $ notes delete 123

With shortcuts:

    $ notes n my-awesome-idea
    $ notes l
    $ notes s rsync
    $ notes e 123
    $ notes d 123

Version: {version}
"""


def usage(version: str) -> str:
    return USAGE.format(version=version)
