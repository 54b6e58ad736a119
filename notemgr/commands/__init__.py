"""
Public command surface.

Callers (the dispatcher, tests) should import command classes from here
rather than reaching into submodules directly.
"""

from .base import Command, StoreCommand, parse_note_id, strip_quotes
from .lifecycle import ExitCommand, HelpCommand
from .notes import (
    AddNoteCommand,
    DeleteNoteCommand,
    ListNotesCommand,
    SearchNoteCommand,
    UpdateNoteCommand,
)
from .transfer import ExportNotesCommand, ImportNotesCommand, ensure_json_suffix

__all__ = [
    "Command",
    "StoreCommand",
    "parse_note_id",
    "strip_quotes",
    "AddNoteCommand",
    "ListNotesCommand",
    "DeleteNoteCommand",
    "SearchNoteCommand",
    "UpdateNoteCommand",
    "ExportNotesCommand",
    "ImportNotesCommand",
    "ensure_json_suffix",
    "HelpCommand",
    "ExitCommand",
]
