"""Relationship graph domain models."""

from collections import deque
from typing import Literal

from pydantic import BaseModel

from vaultgraph.domain.note import Note


class NoteRelationship(BaseModel):
    """Represents a resolved relationship between two notes."""

    source_note_id: str
    target_note_id: str
    relationship_type: Literal["wikilink", "embed"]
    context: str = ""  # surrounding text where link appears
    strength: float = 1.0  # relationship weight/frequency


class NoteGraph(BaseModel):
    """Forward links and backlinks between the notes of a store.

    Attributes:
        notes: Note ID to Note, in ingestion order
        outbound: Note ID to the IDs it links to, in first-seen order
        inbound: Note ID to the IDs linking to it, in first-seen order
        relationships: One relationship per distinct (source, target, type)
        note_clusters: Folder path to the IDs of the notes in it
    """

    notes: dict[str, Note] = {}
    outbound: dict[str, list[str]] = {}
    inbound: dict[str, list[str]] = {}
    relationships: list[NoteRelationship] = []
    note_clusters: dict[str, list[str]] = {}

    def backlinks(self, note: Note | str) -> set[Note]:
        """Notes holding a resolved link to the given note.

        Returns an empty set for orphans and for notes not in the graph.
        """
        note_id = _note_id(note)
        return {self.notes[nid] for nid in self.inbound.get(note_id, []) if nid in self.notes}

    def forward_links(self, note: Note | str) -> list[Note]:
        """Notes the given note links to, in first-seen order."""
        note_id = _note_id(note)
        return [self.notes[nid] for nid in self.outbound.get(note_id, []) if nid in self.notes]

    def orphans(self) -> list[Note]:
        """Notes with neither forward links nor backlinks."""
        return [
            note
            for note_id, note in self.notes.items()
            if not self.outbound.get(note_id) and not self.inbound.get(note_id)
        ]

    def related_notes(self, note: Note | str, max_depth: int = 2) -> list[Note]:
        """Get notes reachable through links in either direction."""
        note_id = _note_id(note)
        if note_id not in self.notes:
            return []

        visited = {note_id}
        related_notes = []
        queue = deque([(note_id, 0)])  # (note_id, depth)

        while queue:
            current_id, depth = queue.popleft()

            if depth > 0:  # Don't include the source note itself
                related_notes.append(self.notes[current_id])

            if depth < max_depth:
                for linked_id in self._neighbours(current_id):
                    if linked_id not in visited:
                        visited.add(linked_id)
                        queue.append((linked_id, depth + 1))

        return related_notes

    def find_path(self, source: Note | str, target: Note | str) -> list[str]:
        """Find the shortest path of note IDs between two notes, ignoring direction."""
        source_id = _note_id(source)
        target_id = _note_id(target)
        if source_id not in self.notes or target_id not in self.notes:
            return []

        if source_id == target_id:
            return [source_id]

        visited = {source_id}
        queue = deque([(source_id, [source_id])])  # (note_id, path)

        while queue:
            current_id, path = queue.popleft()
            for connected_id in self._neighbours(current_id):
                if connected_id == target_id:
                    return path + [connected_id]

                if connected_id not in visited:
                    visited.add(connected_id)
                    queue.append((connected_id, path + [connected_id]))

        return []  # No path found

    def get_relationship_context(self, source: Note | str, target: Note | str) -> str:
        """Get the context text for a relationship between two notes."""
        source_id = _note_id(source)
        target_id = _note_id(target)
        for rel in self.relationships:
            if rel.source_note_id == source_id and rel.target_note_id == target_id:
                return rel.context
        return ""

    def get_note_cluster(self, note: Note | str) -> list[Note]:
        """Get all other notes in the same folder as the given note."""
        found = self.notes.get(_note_id(note))
        if not found or not found.folder_path:
            return []

        cluster_note_ids = self.note_clusters.get(found.folder_path, [])
        return [self.notes[nid] for nid in cluster_note_ids if nid != found.id]

    def _neighbours(self, note_id: str) -> list[str]:
        return [
            nid
            for nid in self.outbound.get(note_id, []) + self.inbound.get(note_id, [])
            if nid in self.notes
        ]


def _note_id(note: Note | str) -> str:
    return note if isinstance(note, str) else note.id
