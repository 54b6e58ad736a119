"""
File transfer commands: export and import.

Both take a single path, either as the first argument or from a prompt.
Failures (unwritable path, missing file, malformed JSON) are printed and
leave the store untouched.
"""

from typing import List, Optional

from notemgr.commands.base import StoreCommand, strip_quotes
from notemgr.errors import ParseError, StorageWriteError, ValidationError


def ensure_json_suffix(path: str) -> str:
    """Append `.json` unless the path already ends with it (any case)."""
    if path.lower().endswith(".json"):
        return path
    return path + ".json"


class ExportNotesCommand(StoreCommand):
    name = "export"
    description = 'Export notes to JSON file (usage: export "filename.json" OR just export for interactive mode)'

    def run(self, args: Optional[List[str]]) -> None:
        if args:
            path = strip_quotes(args[0])
        else:
            path = self.console.prompt("Enter export file path (e.g., notes.json)")

        if not path.strip():
            raise ValidationError("File path cannot be empty.")

        path = ensure_json_suffix(path)

        try:
            self.store.export_to(path)
        except StorageWriteError as e:
            self.console.echo(f"Error exporting notes: {e}")
            return

        self.console.echo(f"Notes exported successfully to {path}")


class ImportNotesCommand(StoreCommand):
    name = "import"
    description = 'Import notes from JSON file (usage: import "filename.json" OR just import for interactive mode)'

    def run(self, args: Optional[List[str]]) -> None:
        if args:
            path = strip_quotes(args[0])
        else:
            path = self.console.prompt("Enter import file path")

        if not path.strip():
            raise ValidationError("File path cannot be empty.")

        # NotFoundError propagates to execute(), which prints "File ... not found."
        try:
            count = self.store.import_from(path)
        except ParseError as e:
            self.console.echo(f"Error importing notes: {e}")
            return

        self.console.echo(f"Imported {count} notes successfully from {path}")
