"""
Note lifecycle commands: add, list, delete, search, update.

Each command accepts its values either as positional arguments
(`add "title" "content"`) or, when typed with no arguments, by prompting
for them one at a time. The argument-count rules differ per command and
are documented on each class.
"""

from typing import List, Optional

from notemgr.commands.base import StoreCommand, parse_note_id, strip_quotes
from notemgr.errors import NotFoundError, ValidationError
from notemgr.models import Note

ADD_USAGE = "Usage: add \"title\" \"content\" OR just 'add' for interactive mode"


def render_notes(notes: List[Note]) -> List[str]:
    """Lines for a list of notes, newest first, each followed by a blank line."""
    lines: List[str] = []
    for note in sorted(notes, key=lambda n: n.created_at, reverse=True):
        lines.extend(note.format_lines())
        lines.append("")
    return lines


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------
class AddNoteCommand(StoreCommand):
    """
    add "title" "content"  → exactly two arguments
    add                     → prompt for title, then content

    One argument or more than two is an error. A blank title is rejected
    in both modes; blank content is allowed.
    """

    name = "add"
    description = 'Add a new note (usage: add "title" "content" OR just add for interactive mode)'

    def run(self, args: Optional[List[str]]) -> None:
        if args:
            if len(args) == 1:
                raise ValidationError(f"Error: Missing content parameter.\n{ADD_USAGE}")
            if len(args) > 2:
                raise ValidationError(
                    f"Error: Too many parameters ({len(args)}). Expected exactly 2.\n{ADD_USAGE}"
                )
            title = strip_quotes(args[0])
            content = strip_quotes(args[1])
        else:
            title = self.console.prompt("Enter note title")
            content = self.console.prompt("Enter note content")

        if not title.strip():
            raise ValidationError("Title cannot be empty.")

        note = self.store.add(title, content)
        self.console.echo(f"Note '{note.title}' added successfully with ID: {note.id}")


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------
class ListNotesCommand(StoreCommand):
    name = "list"
    description = "List all notes"

    def run(self, args: Optional[List[str]]) -> None:
        notes = self.store.list_notes()
        if not notes:
            self.console.echo("No notes found.")
            return

        self.console.echo("Your notes:")
        self.echo_lines(render_notes(notes))


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------
class DeleteNoteCommand(StoreCommand):
    """
    delete <id>  → delete directly
    delete       → prompt for the id

    A first argument that is not an integer also falls back to prompting.
    """

    name = "delete"
    description = "Delete a note by ID (usage: delete id OR just delete for interactive mode)"

    def run(self, args: Optional[List[str]]) -> None:
        note_id = parse_note_id(args[0]) if args else None

        if note_id is None:
            note_id = parse_note_id(self.console.prompt("Enter note ID to delete"))
            if note_id is None:
                raise ValidationError("Invalid ID format.")

        note = self.store.get(note_id)
        if note is None:
            raise NotFoundError(f"Note with ID {note_id} not found.")

        self.store.delete(note_id)
        self.console.echo(f"Note '{note.title}' deleted successfully.")


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------
class SearchNoteCommand(StoreCommand):
    """
    search "term"  → first argument is the term, extras are ignored
    search         → prompt for the term
    """

    name = "search"
    description = 'Search notes by title or content (usage: search "term" OR just search for interactive mode)'

    def run(self, args: Optional[List[str]]) -> None:
        if args:
            term = strip_quotes(args[0])
        else:
            term = self.console.prompt("Enter search term")

        if not term.strip():
            raise ValidationError("Search term cannot be empty.")

        results = self.store.search(term)
        if not results:
            self.console.echo(f"No notes found matching '{term}'.")
            return

        self.console.echo(f"Found {len(results)} note(s) matching '{term}':")
        self.echo_lines(render_notes(results))


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------
class UpdateNoteCommand(StoreCommand):
    """
    update <id> ["new title"] ["new content"]  → update directly
    update                                     → prompt for id, title, content

    A first argument that is not an integer falls back to prompting. Blank
    titles or contents (including unanswered prompts) keep the current
    value.
    """

    name = "update"
    description = 'Update a note (usage: update id "new title" "new content" OR just update for interactive mode)'

    def run(self, args: Optional[List[str]]) -> None:
        new_title: Optional[str] = None
        new_content: Optional[str] = None

        note_id = parse_note_id(args[0]) if args else None

        if note_id is not None and args:
            if len(args) >= 2:
                new_title = strip_quotes(args[1])
            if len(args) >= 3:
                new_content = strip_quotes(args[2])
        else:
            note_id = parse_note_id(self.console.prompt("Enter note ID to update"))
            if note_id is None:
                raise ValidationError("Invalid ID format.")

            new_title = self.console.prompt("Enter new title (leave empty to keep current)")
            new_content = self.console.prompt("Enter new content (leave empty to keep current)")

        if not self.store.update(note_id, new_title, new_content):
            raise NotFoundError(f"Note with ID {note_id} not found.")

        self.console.echo(f"Note {note_id} updated successfully.")
