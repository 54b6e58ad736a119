"""
Session-level commands: help and exit.
"""

from typing import Callable, Iterable, List, Optional

from notemgr.commands.base import Command
from notemgr.types import CommandInterface, ConsoleInterface


class HelpCommand(Command):
    """
    Print every registered command with its description.

    `commands` is a zero-argument callable rather than a list so that
    commands registered after help (including help itself) are listed.
    """

    name = "help"
    description = "Show available commands"

    def __init__(
        self,
        commands: Callable[[], Iterable[CommandInterface]],
        console: ConsoleInterface,
    ) -> None:
        super().__init__(console)
        self._commands = commands

    def run(self, args: Optional[List[str]]) -> None:
        self.console.echo("Available commands:")
        for command in self._commands():
            self.console.echo(f"  {command.name} - {command.description}")


class ExitCommand(Command):
    """
    Save the session and terminate.

    `shutdown` is Session.shutdown, the same routine the interrupt handler
    calls. It does not return.
    """

    name = "exit"
    description = "Exit the application"

    def __init__(self, shutdown: Callable[[], None], console: ConsoleInterface) -> None:
        super().__init__(console)
        self._shutdown = shutdown

    def run(self, args: Optional[List[str]]) -> None:
        self.console.echo("Saving session data...")
        self._shutdown()
