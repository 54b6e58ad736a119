"""
Exception hierarchy for the note manager.

Every failure the store can report derives from NoteManagerError, so the
command layer can catch one base class at its boundary and print the
message instead of crashing the session.

Each subclass also inherits from the closest builtin exception, which lets
callers that only know about ValueError / LookupError / OSError keep
working.
"""


class NoteManagerError(Exception):
    """Base class for all reportable note manager failures."""


class ValidationError(NoteManagerError, ValueError):
    """A required field was blank, an argument count was wrong, or an id was not an integer."""


class NotFoundError(NoteManagerError, LookupError):
    """A note id or an import file does not exist."""


class ParseError(NoteManagerError, ValueError):
    """A JSON file could not be decoded into notes or a snapshot."""


class StorageWriteError(NoteManagerError, OSError):
    """
    An export or auto-save file could not be written.

    Named StorageWriteError rather than IOError because IOError is a
    builtin alias of OSError and must not be shadowed.
    """
