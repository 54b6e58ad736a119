"""
Public API surface for the note manager.

External callers (the CLI, tests, embedding applications) should import
from here rather than reaching into submodules directly:

    from notemgr import NoteStore, Session, tokenize
"""

from .dispatcher import CommandDispatcher, build_dispatcher, tokenize
from .errors import (
    NoteManagerError,
    NotFoundError,
    ParseError,
    StorageWriteError,
    ValidationError,
)
from .models import Note
from .session import Session
from .store import NoteStore

__all__ = [
    "CommandDispatcher",
    "build_dispatcher",
    "tokenize",
    "Note",
    "NoteStore",
    "Session",
    "NoteManagerError",
    "ValidationError",
    "NotFoundError",
    "ParseError",
    "StorageWriteError",
]
