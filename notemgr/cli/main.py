"""
Root entrypoint for the note manager CLI.

This module defines the top-level `notemgr` command. It wires together
the pieces of an interactive session:

    • notemgr/config.py      →  auto-save path + verbose flag resolution
    • notemgr/store.py       →  the NoteStore (loads the previous session)
    • notemgr/session.py     →  banner, read loop, save-then-exit

Usage:

    notemgr                              # auto-save next to the program name
    notemgr --autosave-path work.json    # separate session file
    notemgr --no-autoload                # start empty, still save on exit

Note commands themselves (add, list, search, ...) are typed at the
`note>` prompt, not passed as flags.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
from pathlib import Path
from typing import Optional

import typer

from notemgr.config import resolve_autosave_path, verbose_from_env
from notemgr.console import Console
from notemgr.logging_utils import log_verbose
from notemgr.session import Session
from notemgr.store import NoteStore

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Interactive note manager.\n\n"
        "Starts a `note>` prompt where notes can be added, listed, searched, "
        "updated, deleted, exported and imported. The session is saved to an "
        "auto-save JSON file on `exit` or Ctrl+C and restored on the next start."
    ),
    add_completion=False,
)


@cli.command()
def run(
    autosave_path: Optional[Path] = typer.Option(
        None,
        "--autosave-path",
        dir_okay=False,
        help=(
            "Session snapshot file. Defaults to $NOTEMGR_AUTOSAVE_PATH, "
            "then <program name>.json in the current directory."
        ),
    ),
    no_autoload: bool = typer.Option(
        False,
        "--no-autoload",
        help="Do not restore the previous session on startup.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show progress messages for file operations.",
    ),
) -> None:
    """
    Start an interactive note manager session.
    """
    verbose = verbose or verbose_from_env()
    path = resolve_autosave_path(autosave_path)
    log_verbose(f"Using auto-save file: {path}", verbose)

    console = Console()
    store = NoteStore(path, autoload=not no_autoload, verbose=verbose)
    Session(store, console, verbose=verbose).run()


# ---------------------------------------------------------------------------
# Entry point for `python -m notemgr.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
