"""
Terminal adapter used by commands and the session loop.

Commands never read stdin or write stdout themselves; they receive a
Console (or any object matching ConsoleInterface in notemgr/types.py) at
construction. Tests substitute a scripted double.
"""

import typer


class Console:
    """typer-backed implementation of ConsoleInterface."""

    def echo(self, message: str = "") -> None:
        typer.echo(message)

    def prompt(self, text: str) -> str:
        """
        Ask for one value, shown as `<text>: `. An empty answer is allowed.

        End of input and Ctrl+C while waiting surface as typer.Abort,
        which the session treats the same as an interrupt.
        """
        return typer.prompt(text, default="", show_default=False)

    def read_line(self, prompt: str) -> str:
        """Read one command line after `prompt` (no suffix is added)."""
        return typer.prompt(prompt, default="", show_default=False, prompt_suffix="")
