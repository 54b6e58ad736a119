"""
notemgr/types.py

Centralized type definitions for the note manager.

This module defines the TypedDicts and Protocols shared by the note store,
the JSON file codec, and the command layer. Keeping these types in one
place ensures:

    • A single source of truth for the on-disk note and snapshot schemas
    • Clear contracts between the dispatcher, commands, and the store
    • Easy dependency injection of fake consoles in tests

When the on-disk format changes, this file should be updated first.
"""

from typing import List, Optional, Protocol, TypedDict


# ---------------------------------------------------------------------------
# NoteRecord
# ---------------------------------------------------------------------------
# Represents a single note as it appears in JSON files (auto-save snapshot,
# export, and import).
#
# Keys are PascalCase and case-sensitive. Files written by earlier versions
# of the program use this exact shape, so the names must not change.
#
# total=False because import tolerates missing Title / Content fields.
# ---------------------------------------------------------------------------
class NoteRecord(TypedDict, total=False):
    Id: int
    Title: str
    Content: str
    CreatedAt: str


# ---------------------------------------------------------------------------
# SnapshotRecord
# ---------------------------------------------------------------------------
# The auto-save file envelope. Only the auto-save path uses this shape;
# export/import files are bare lists of NoteRecord.
# ---------------------------------------------------------------------------
class SnapshotRecord(TypedDict, total=False):
    Notes: List[NoteRecord]
    NextId: int
    LastSaved: str


# ---------------------------------------------------------------------------
# ConsoleInterface
# ---------------------------------------------------------------------------
# The terminal operations commands and the session loop may perform.
#
# The real implementation (notemgr.console.Console) wraps typer.echo and
# typer.prompt. Tests inject a scripted double with the same surface.
# ---------------------------------------------------------------------------
class ConsoleInterface(Protocol):
    def echo(self, message: str = "") -> None:
        """Write one line of output."""
        ...

    def prompt(self, text: str) -> str:
        """Show `text` and return the line the user typed (may be empty)."""
        ...

    def read_line(self, prompt: str) -> str:
        """Read one command line for the session loop."""
        ...


# ---------------------------------------------------------------------------
# CommandInterface
# ---------------------------------------------------------------------------
# Structural interface implemented by every registered command.
#
# `args` is None when the user typed only the command name, which is the
# signal for commands that support it to switch to interactive prompting.
# ---------------------------------------------------------------------------
class CommandInterface(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    def execute(self, args: Optional[List[str]] = None) -> None: ...
