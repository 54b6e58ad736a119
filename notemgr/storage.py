"""
JSON file codec for notes and session snapshots.

This module is the only place that knows the on-disk shapes described in
notemgr/types.py. It converts between Note objects and NoteRecord /
SnapshotRecord dictionaries and wraps file I/O so the store only ever sees
the domain exceptions from notemgr/errors.py.

File formats
------------
Export / import files hold a bare JSON array of notes:

    [
      {"Id": 1, "Title": "...", "Content": "...", "CreatedAt": "2024-05-01T09:30:00"}
    ]

The auto-save file wraps the notes in an envelope:

    {"Notes": [...], "NextId": 4, "LastSaved": "2024-05-01T10:00:00"}

Both are written with indent=2. No atomic-rename: a failed write leaves
whatever the filesystem left behind.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Tuple

from notemgr.errors import NotFoundError, ParseError, StorageWriteError
from notemgr.models import Note
from notemgr.types import NoteRecord, SnapshotRecord


# ---------------------------------------------------------------------------
# Note <-> record conversion
# ---------------------------------------------------------------------------
def note_to_record(note: Note) -> NoteRecord:
    return {
        "Id": note.id,
        "Title": note.title,
        "Content": note.content,
        "CreatedAt": note.created_at.isoformat(),
    }


def _parse_timestamp(value: Any, field: str) -> datetime:
    if not isinstance(value, str):
        raise ParseError(f"{field} must be an ISO-8601 string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ParseError(f"Invalid {field} timestamp: {value!r}") from e

    # Session notes are local naive times; offset-aware values are converted
    # so that every CreatedAt in the store can be compared.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def note_from_record(record: Any, id: int) -> Note:
    """
    Build a Note from a decoded JSON object, using `id` instead of any Id
    present in the record.

    Missing Title / Content default to empty strings. CreatedAt is required.

    Raises
    ------
    ParseError
        If the record is not an object, a text field is not a string, or
        CreatedAt is missing or not a valid ISO-8601 timestamp.
    """
    if not isinstance(record, dict):
        raise ParseError(f"Expected a note object, got {type(record).__name__}")

    title = record.get("Title", "")
    content = record.get("Content", "")
    if title is None:
        title = ""
    if content is None:
        content = ""
    if not isinstance(title, str) or not isinstance(content, str):
        raise ParseError("Title and Content must be strings")

    if "CreatedAt" not in record:
        raise ParseError("Note is missing CreatedAt")

    return Note(id, title, content, _parse_timestamp(record["CreatedAt"], "CreatedAt"))


# ---------------------------------------------------------------------------
# Raw file helpers
# ---------------------------------------------------------------------------
def read_json_file(path: Path) -> Any:
    """
    Load a JSON file from disk.

    Raises
    ------
    NotFoundError
        If the file does not exist.
    ParseError
        If the file cannot be read as UTF-8 or contains invalid JSON.
    """
    if not path.exists():
        raise NotFoundError(f"File {path} not found.")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ParseError(f"Could not read {path}: {e}") from e


def write_json_file(path: Path, payload: Any) -> None:
    """
    Serialize `payload` as indented JSON to `path`.

    Raises
    ------
    StorageWriteError
        If the file cannot be opened or written.
    """
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise StorageWriteError(f"Could not write {path}: {e}") from e


# ---------------------------------------------------------------------------
# Export / import format (bare array)
# ---------------------------------------------------------------------------
def write_notes(path: Path, notes: List[Note]) -> None:
    write_json_file(path, [note_to_record(n) for n in notes])


def read_notes(path: Path, first_id: int) -> List[Note]:
    """
    Read a bare JSON array of notes, numbering them from `first_id`.

    The whole file is decoded and validated before anything is returned,
    so a bad entry anywhere means no notes at all.
    """
    data = read_json_file(path)
    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array of notes in {path}")

    return [note_from_record(record, first_id + i) for i, record in enumerate(data)]


# ---------------------------------------------------------------------------
# Auto-save snapshot format (envelope)
# ---------------------------------------------------------------------------
def write_snapshot(path: Path, notes: List[Note], next_id: int, saved_at: datetime) -> None:
    snapshot: SnapshotRecord = {
        "Notes": [note_to_record(n) for n in notes],
        "NextId": next_id,
        "LastSaved": saved_at.isoformat(),
    }
    write_json_file(path, snapshot)


def read_snapshot(path: Path) -> Tuple[List[Note], int]:
    """
    Read an auto-save snapshot and return (notes, next_id).

    Unlike import, snapshot notes keep the Id stored in the file.

    Raises
    ------
    NotFoundError
        If the file does not exist.
    ParseError
        If the envelope or any note in it is malformed.
    """
    data = read_json_file(path)
    if not isinstance(data, dict):
        raise ParseError(f"Expected a snapshot object in {path}")

    records = data.get("Notes")
    if records is None:
        records = []
    if not isinstance(records, list):
        raise ParseError("Snapshot Notes must be a list")

    notes = []
    for record in records:
        if not isinstance(record, dict):
            raise ParseError(f"Expected a note object, got {type(record).__name__}")
        note_id = record.get("Id")
        if not isinstance(note_id, int) or isinstance(note_id, bool):
            raise ParseError(f"Snapshot note has an invalid Id: {note_id!r}")
        notes.append(note_from_record(record, note_id))

    next_id = data.get("NextId", 1)
    if not isinstance(next_id, int) or isinstance(next_id, bool):
        raise ParseError(f"Snapshot NextId must be an integer, got {next_id!r}")

    return notes, next_id
