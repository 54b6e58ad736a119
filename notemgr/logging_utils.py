"""
logging_utils.py

A small collection of output helpers used across the note manager.

Commands and the session report results to the user as plain lines of
text. These helpers keep that output consistent and centralized.

This module intentionally avoids any heavy logging frameworks. The goal
is lightweight, predictable output that works well with Typer and stays
readable when the session is driven by a test runner.
"""

import typer


def report(message: str = "") -> None:
    """
    Print a user-facing line.

    Used for results the user asked for (added, deleted, saved, ...).
    """
    typer.echo(message)


def warn(message: str) -> None:
    """
    Print a warning line.

    Warnings go to stdout alongside normal output so that the interactive
    transcript stays in order.
    """
    typer.echo(f"Warning: {message}")


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what is happening
        (e.g. "Reading auto-save file...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.

    Notes
    -----
    - No timestamps or prefixes beyond what the caller provides.
    """
    if verbose:
        typer.echo(message)
