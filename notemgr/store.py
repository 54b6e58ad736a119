"""
In-memory note store with JSON persistence.

The store is the single owner of the note collection and the id counter.
Every other component (commands, session) receives a reference to one
NoteStore instance and goes through its methods; nothing else mutates the
notes or `next_id` directly.

Id assignment
-------------
`next_id` starts at 1 and is incremented for every added or imported note.
It never decreases, and deleting a note does not free its id, so an id is
never handed out twice within a session or across sessions restored from
the auto-save file.

Persistence
-----------
    • auto-save file — full snapshot (notes + next id + save time), read once
      at construction and written on exit / interrupt
    • export / import — bare note arrays at user-supplied paths

Store methods raise the exceptions in notemgr/errors.py. Reporting them is
the caller's job, with one exception: the auto-save load that happens
during construction is reported here, because there is no caller yet to
hand the error to.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from notemgr import storage
from notemgr.errors import NoteManagerError
from notemgr.logging_utils import log_verbose, report, warn
from notemgr.models import Note

PathLike = Union[str, Path]


class NoteStore:
    """
    Ordered, in-memory collection of notes backed by an auto-save file.

    Parameters
    ----------
    autosave_path : str | Path
        Where the session snapshot is read from and written to.
    autoload : bool
        If True (the default), call load_autosave() during construction.
    verbose : bool
        Emit progress messages through logging_utils.log_verbose.
    clock : callable
        Returns the current time. Injected by tests that need distinct or
        fixed timestamps.
    """

    def __init__(
        self,
        autosave_path: PathLike,
        autoload: bool = True,
        verbose: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._autosave_path = Path(autosave_path)
        self._notes: List[Note] = []
        self._next_id = 1
        self.verbose = verbose
        self._clock = clock

        if autoload:
            self.load_autosave()

    # -----------------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------------

    @property
    def autosave_path(self) -> Path:
        return self._autosave_path

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._notes)

    def get(self, note_id: int) -> Optional[Note]:
        """Return the note with `note_id`, or None."""
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    # -----------------------------------------------------------------------
    # CRUD
    # -----------------------------------------------------------------------

    def add(self, title: str, content: str) -> Note:
        """
        Append a new note and return it.

        The title is not validated here; the add command rejects blank
        titles before calling the store.
        """
        note = Note(self._next_id, title, content, self._clock())
        self._next_id += 1
        self._notes.append(note)
        return note

    def list_notes(self) -> List[Note]:
        """Return all notes, most recently created first."""
        # sorted() is stable, so notes with equal timestamps keep insertion order.
        return sorted(self._notes, key=lambda n: n.created_at, reverse=True)

    def delete(self, note_id: int) -> bool:
        """Remove the note with `note_id`. Returns whether it existed."""
        note = self.get(note_id)
        if note is None:
            return False
        self._notes.remove(note)
        return True

    def search(self, term: str) -> List[Note]:
        """
        Case-insensitive substring search over title and content.

        Results are in insertion order; callers sort for display.
        """
        return [note for note in self._notes if note.matches(term)]

    def update(
        self,
        note_id: int,
        new_title: Optional[str] = None,
        new_content: Optional[str] = None,
    ) -> bool:
        """
        Change a note's title and/or content. Returns whether it existed.

        A field is replaced only when the new value is non-blank. Passing
        None, "" or whitespace leaves that field as it was.
        """
        note = self.get(note_id)
        if note is None:
            return False

        if new_title and new_title.strip():
            note.title = new_title
        if new_content and new_content.strip():
            note.content = new_content
        return True

    # -----------------------------------------------------------------------
    # Export / import
    # -----------------------------------------------------------------------

    def export_to(self, path: PathLike) -> None:
        """
        Write the current notes as a bare JSON array to `path`.

        Raises
        ------
        StorageWriteError
            If the path cannot be written.
        """
        log_verbose(f"Exporting {len(self._notes)} note(s) to {path}...", self.verbose)
        storage.write_notes(Path(path), list(self._notes))

    def import_from(self, path: PathLike) -> int:
        """
        Append the notes stored at `path` and return how many were added.

        Every imported note gets a fresh id from the store's counter; ids
        in the file are ignored.

        Raises
        ------
        NotFoundError
            If `path` does not exist.
        ParseError
            If the file is not a JSON array of valid notes. Nothing is
            appended in that case.
        """
        log_verbose(f"Importing notes from {path}...", self.verbose)
        imported = storage.read_notes(Path(path), first_id=self._next_id)

        self._notes.extend(imported)
        self._next_id += len(imported)
        return len(imported)

    # -----------------------------------------------------------------------
    # Auto-save
    # -----------------------------------------------------------------------

    def load_autosave(self) -> int:
        """
        Restore the previous session from the auto-save file.

        A missing file means a fresh store and is silent. Any other failure
        is reported as a warning and leaves the store empty. Returns the
        number of notes loaded.
        """
        if not self._autosave_path.exists():
            log_verbose(f"No auto-save file at {self._autosave_path}; starting empty.", self.verbose)
            return 0

        try:
            notes, next_id = storage.read_snapshot(self._autosave_path)
        except NoteManagerError as e:
            warn(f"Could not load previous session data: {e}")
            return 0

        highest = max((n.id for n in notes), default=0)
        if next_id <= highest:
            warn(f"Auto-save NextId {next_id} is not above existing ids; using {highest + 1}.")
            next_id = highest + 1

        self._notes = notes
        self._next_id = next_id
        report(f"✓ Loaded {len(notes)} note(s) from previous session ({self._autosave_path})")
        return len(notes)

    def save_autosave(self) -> None:
        """
        Write the full snapshot to the auto-save file.

        Raises
        ------
        StorageWriteError
            If the file cannot be written.
        """
        log_verbose(f"Writing auto-save file {self._autosave_path}...", self.verbose)
        storage.write_snapshot(self._autosave_path, list(self._notes), self._next_id, self._clock())
