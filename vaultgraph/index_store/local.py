import json
from pathlib import Path
from typing import List

from vaultgraph.domain.graph import NoteGraph
from vaultgraph.domain.links import DanglingLink
from vaultgraph.domain.note import Note
from vaultgraph.domain.report import IndexReport
from vaultgraph.index_store.base import IndexStore


class LocalIndexStore(IndexStore):
    """Local index store that keeps the note graph in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalIndexStore.

        Args:
            filepath: Path to index file. If provided and exists, will auto-load.
                     If provided and doesn't exist, will save to this path when save() is called.
                     If not provided, creates empty index in memory only.
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._graph = NoteGraph(**data["graph"])
            self._report = IndexReport(**data.get("report", {}))
        else:
            self._graph = NoteGraph()
            self._report = IndexReport()

    @classmethod
    def from_data(
        cls, graph: NoteGraph | None = None, report: IndexReport | None = None
    ) -> "LocalIndexStore":
        """Create LocalIndexStore from provided data (useful for testing)."""
        instance = cls(filepath=None)
        instance.update(graph or NoteGraph(), report or IndexReport())
        return instance

    @property
    def graph(self) -> NoteGraph:
        return self._graph

    def get_note(self, note_id: str) -> Note | None:
        """Get a note by its ID."""
        return self._graph.notes.get(note_id)

    def list_notes(self, tag: str | None = None) -> List[Note]:
        """List notes in ingestion order, optionally only those with a tag."""
        notes = list(self._graph.notes.values())
        if tag is None:
            return notes

        key = tag.lstrip("#").casefold()
        return [note for note in notes if any(t.casefold() == key for t in note.all_tags)]

    def find_note_by_title(self, title: str) -> Note | None:
        """Find note by title, falling back to aliases."""
        # Try different matching strategies in order of precision
        for strategy in [
            self._match_exact_title,
            self._match_case_insensitive_title,
            self._match_alias,
        ]:
            result = strategy(title.strip())
            if result:
                return result
        return None

    def _match_exact_title(self, title: str) -> Note | None:
        for note in self._graph.notes.values():
            if note.title == title:
                return note
        return None

    def _match_case_insensitive_title(self, title: str) -> Note | None:
        for note in self._graph.notes.values():
            if note.title.casefold() == title.casefold():
                return note
        return None

    def _match_alias(self, title: str) -> Note | None:
        for note in self._graph.notes.values():
            if any(alias.casefold() == title.casefold() for alias in note.aliases):
                return note
        return None

    def get_backlinks(self, note_id: str) -> List[Note]:
        """Get the notes linking to the given note, in first-seen order."""
        return [
            self._graph.notes[nid]
            for nid in self._graph.inbound.get(note_id, [])
            if nid in self._graph.notes
        ]

    def get_forward_links(self, note_id: str) -> List[Note]:
        """Get the notes the given note links to."""
        return self._graph.forward_links(note_id)

    def get_dangling_links(self) -> List[DanglingLink]:
        """Get the dangling links recorded by the last indexing pass."""
        return list(self._report.dangling_links)

    def update(self, graph: NoteGraph, report: IndexReport) -> None:
        """Replace the stored index."""
        self._graph = graph
        self._report = report

    def save(self, filepath: str | None = None) -> None:
        """Save the index to a JSON file.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        data = {
            "graph": self._graph.model_dump(mode="json"),
            "report": self._report.model_dump(mode="json"),
        }
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
