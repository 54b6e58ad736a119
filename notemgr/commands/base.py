"""
Shared plumbing for registered commands.

Every command is a small class with a `name`, a `description` shown by
`help`, and an `execute(args)` method. `args` is None when the user typed
only the command name; for commands that support it, that switches them
into interactive mode where missing values are prompted for.
"""

import re
from typing import List, Optional

from notemgr.errors import NoteManagerError
from notemgr.store import NoteStore
from notemgr.types import ConsoleInterface

# Optional surrounding whitespace, optional sign, ASCII digits.
_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_note_id(text: Optional[str]) -> Optional[int]:
    """
    Parse a note id, returning None if `text` is not an integer.

    Stricter than int(): underscores and non-ASCII digits are rejected.
    """
    if text is None or not _INTEGER_RE.match(text):
        return None
    return int(text)


def strip_quotes(arg: str) -> str:
    """
    Remove leading and trailing double-quote characters from an argument.

    The tokenizer already drops quote characters, so for input that came
    through the dispatcher this is a no-op. It only changes arguments
    passed to execute() directly. Kept for compatibility with the old
    command behaviour; see tests/test_commands.py.
    """
    return arg.strip('"')


class Command:
    """
    Base class for registered commands.

    Subclasses implement run(). execute() is the entry point used by the
    dispatcher: any NoteManagerError raised by run() is printed and the
    session carries on.
    """

    name = ""
    description = ""

    def __init__(self, console: ConsoleInterface) -> None:
        self.console = console

    def execute(self, args: Optional[List[str]] = None) -> None:
        try:
            self.run(args)
        except NoteManagerError as e:
            self.console.echo(str(e))

    def run(self, args: Optional[List[str]]) -> None:
        raise NotImplementedError

    def echo_lines(self, lines: List[str]) -> None:
        for line in lines:
            self.console.echo(line)


class StoreCommand(Command):
    """A command that operates on the note store."""

    def __init__(self, store: NoteStore, console: ConsoleInterface) -> None:
        super().__init__(console)
        self.store = store
