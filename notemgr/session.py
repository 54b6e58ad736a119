"""
Interactive session: banner, read loop, and the save-then-exit routine.

There are three ways a session ends, and all of them go through
Session.shutdown():

    • the `exit` command
    • Ctrl+C (SIGINT), handled by _on_interrupt
    • end of input (Ctrl+D / closed stdin), surfaced by typer as Abort

shutdown() attempts one auto-save, reports the outcome, and raises
typer.Exit(0). A failed save is reported but does not stop the exit.
"""

import signal
import threading
from typing import Any, Optional

import typer

from notemgr.dispatcher import CommandDispatcher, build_dispatcher
from notemgr.errors import StorageWriteError
from notemgr.logging_utils import log_verbose
from notemgr.store import NoteStore
from notemgr.types import ConsoleInterface

BANNER = [
    "=== Note Manager Console Application ===",
    "Manage your notes from the command line!",
    "Type 'help' for available commands or 'exit' to quit.",
    "",
]

PROMPT = "note> "


class Session:
    """
    One interactive run of the note manager.

    Parameters
    ----------
    store : NoteStore
        The session's only store. Passed by reference to every command.
    console : ConsoleInterface
        Where output goes and input comes from.
    dispatcher : CommandDispatcher | None
        Mainly for tests. Defaults to build_dispatcher(store, console, self.shutdown).
    """

    def __init__(
        self,
        store: NoteStore,
        console: ConsoleInterface,
        dispatcher: Optional[CommandDispatcher] = None,
        verbose: bool = False,
    ) -> None:
        self.store = store
        self.console = console
        self.verbose = verbose
        self.dispatcher = dispatcher or build_dispatcher(store, console, self.shutdown)

    # -----------------------------------------------------------------------
    # Shared exit path
    # -----------------------------------------------------------------------

    def shutdown(self) -> None:
        """
        Save the session and terminate with status 0. Never returns.
        """
        try:
            self.store.save_autosave()
        except StorageWriteError as e:
            self.console.echo(f"Error saving session data: {e}")
        else:
            self.console.echo(f"✓ Session data saved to {self.store.autosave_path}")

        self.console.echo("Goodbye!")
        raise typer.Exit(code=0)

    def _on_interrupt(self, signum: int, frame: Any) -> None:
        self.console.echo("")
        self.console.echo("Saving session data before exit...")
        self.shutdown()

    def _install_interrupt_handler(self) -> Any:
        """
        Route SIGINT to _on_interrupt and return the previous handler.

        signal.signal() only works on the main thread; elsewhere Ctrl+C is
        left to the default handling and None is returned.
        """
        if threading.current_thread() is not threading.main_thread():
            return None
        return signal.signal(signal.SIGINT, self._on_interrupt)

    # -----------------------------------------------------------------------
    # Read loop
    # -----------------------------------------------------------------------

    def run(self) -> None:
        """
        Print the banner and process lines until the session ends.

        Always exits via shutdown(), so this raises typer.Exit.
        """
        for line in BANNER:
            self.console.echo(line)

        previous = self._install_interrupt_handler()
        try:
            while True:
                try:
                    line = self.console.read_line(PROMPT)
                except typer.Abort:
                    # Ctrl+D or Ctrl+C at a prompt.
                    log_verbose("Input closed.", self.verbose)
                    self._on_interrupt(signal.SIGINT, None)
                    return

                if not line.strip():
                    continue

                try:
                    self.dispatcher.dispatch(line)
                except typer.Abort:
                    # Input closed while a command was prompting.
                    self._on_interrupt(signal.SIGINT, None)
                    return

                self.console.echo("")
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)
