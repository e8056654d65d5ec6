from typing import List, Protocol

from vaultgraph.domain.graph import NoteGraph
from vaultgraph.domain.links import DanglingLink
from vaultgraph.domain.note import Note
from vaultgraph.domain.report import IndexReport


class IndexStore(Protocol):
    """Protocol for persisted vault index implementations."""

    def get_note(self, note_id: str) -> Note | None:
        """Get a note by its ID."""
        ...

    def list_notes(self, tag: str | None = None) -> List[Note]:
        """List notes in ingestion order, optionally only those with a tag."""
        ...

    def find_note_by_title(self, title: str) -> Note | None:
        """Find a note by title or alias, case-insensitively."""
        ...

    def get_backlinks(self, note_id: str) -> List[Note]:
        """Get the notes linking to the given note."""
        ...

    def get_forward_links(self, note_id: str) -> List[Note]:
        """Get the notes the given note links to."""
        ...

    def get_dangling_links(self) -> List[DanglingLink]:
        """Get the dangling links recorded by the last indexing pass."""
        ...

    def update(self, graph: NoteGraph, report: IndexReport) -> None:
        """Replace the stored index."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the index to disk."""
        ...
