"""
Note model.

A Note is created by the store on add (or import) and lives in the store's
ordered collection. `id` and `created_at` are fixed at creation; `title`
and `content` are changed only through NoteStore.update().
"""

from datetime import datetime

# Display format used by `list` and `search` output.
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"


class Note:
    """A single titled note with a creation timestamp."""

    __slots__ = ("_id", "title", "content", "_created_at")

    def __init__(self, id: int, title: str, content: str, created_at: datetime) -> None:
        self._id = id
        self.title = title
        self.content = content
        self._created_at = created_at

    @property
    def id(self) -> int:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against title or content."""
        needle = term.lower()
        return needle in self.title.lower() or needle in self.content.lower()

    def format_lines(self) -> list[str]:
        """
        Render the note the way `list` and `search` print it:

            [3] Groceries - 2024-05-01 09:30
                milk, eggs
        """
        return [
            f"[{self.id}] {self.title} - {self.created_at.strftime(DISPLAY_TIME_FORMAT)}",
            f"    {self.content}",
        ]

    def __repr__(self) -> str:
        return f"Note(id={self.id!r}, title={self.title!r}, created_at={self.created_at.isoformat()!r})"
