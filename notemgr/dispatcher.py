"""
Command dispatcher: turns one line of input into one command invocation.

    note> add "Groceries" "milk, eggs"
          └─┬┘ └────┬────┘ └────┬────┘
          name    arg[0]      arg[1]

The dispatcher only tokenizes the line and looks the name up in its
registry. Everything else (argument counts, prompting, validation) is
decided by the command itself.
"""

from typing import Callable, Dict, List, Optional

from notemgr.commands import (
    AddNoteCommand,
    DeleteNoteCommand,
    ExitCommand,
    ExportNotesCommand,
    HelpCommand,
    ImportNotesCommand,
    ListNotesCommand,
    SearchNoteCommand,
    UpdateNoteCommand,
)
from notemgr.store import NoteStore
from notemgr.types import CommandInterface, ConsoleInterface


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------
def tokenize(line: str) -> List[str]:
    """
    Split a command line on spaces, keeping double-quoted text together.

    Rules:
        • `"` toggles quoting and is never part of a token
        • a space outside quotes ends the current token (empty tokens are dropped)
        • any other character, including tabs, is part of the token
        • an unterminated quote simply runs to the end of the line

    >>> tokenize('add "hello world" "line1 line2"')
    ['add', 'hello world', 'line1 line2']
    """
    tokens: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == " " and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))

    return tokens


# ---------------------------------------------------------------------------
# Registry + dispatch
# ---------------------------------------------------------------------------
class CommandDispatcher:
    """
    Registry of commands keyed by name.

    Dicts keep insertion order, so `commands()` (and therefore `help`)
    lists commands in the order they were registered.
    """

    def __init__(self, console: ConsoleInterface) -> None:
        self.console = console
        self._commands: Dict[str, CommandInterface] = {}

    def register(self, command: CommandInterface) -> None:
        """Add `command`, replacing any existing command with the same name."""
        self._commands[command.name] = command

    def commands(self) -> List[CommandInterface]:
        return list(self._commands.values())

    def get(self, name: str) -> Optional[CommandInterface]:
        return self._commands.get(name.lower())

    def dispatch(self, line: str) -> bool:
        """
        Run the command named by the first token of `line`.

        Returns True if a command ran, False for blank input or an unknown
        command name. Unknown names are reported, not raised.
        """
        parts = tokenize(line)
        if not parts:
            return False

        name = parts[0].lower()
        args = parts[1:] or None

        command = self._commands.get(name)
        if command is None:
            self.console.echo(f"Unknown command: {name}. Type 'help' for available commands.")
            return False

        command.execute(args)
        return True


def build_dispatcher(
    store: NoteStore,
    console: ConsoleInterface,
    shutdown: Callable[[], None],
) -> CommandDispatcher:
    """
    Create a dispatcher with the standard command set.

    The store and console are passed to each command explicitly; `shutdown`
    is the session's save-then-exit routine used by `exit`.
    """
    dispatcher = CommandDispatcher(console)

    dispatcher.register(AddNoteCommand(store, console))
    dispatcher.register(ListNotesCommand(store, console))
    dispatcher.register(DeleteNoteCommand(store, console))
    dispatcher.register(ExitCommand(shutdown, console))
    dispatcher.register(HelpCommand(dispatcher.commands, console))
    dispatcher.register(SearchNoteCommand(store, console))
    dispatcher.register(UpdateNoteCommand(store, console))
    dispatcher.register(ExportNotesCommand(store, console))
    dispatcher.register(ImportNotesCommand(store, console))

    return dispatcher
