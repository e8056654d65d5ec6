"""Building relationship graphs from resolved links."""

from vaultgraph.domain.graph import NoteGraph, NoteRelationship
from vaultgraph.domain.links import ResolvedLink
from vaultgraph.domain.note import Note
from vaultgraph.ingestion.content_extractor import ContentExtractor

from . import analyzer


class RelationshipGraphBuilder:
    """Builds relationship graphs from resolved links."""

    def build_graph(self, resolved_links: dict[Note, list[ResolvedLink]]) -> NoteGraph:
        """Build the note graph from the output of the reference resolver.

        Args:
            resolved_links: Every note mapped to its resolved links

        Returns:
            NoteGraph with adjacency lists, relationships and note clusters
        """
        notes = {note.id: note for note in resolved_links}
        outbound: dict[str, list[str]] = {note_id: [] for note_id in notes}
        inbound: dict[str, list[str]] = {note_id: [] for note_id in notes}

        for note, links in resolved_links.items():
            for link in links:
                if link.target is None or link.target.id not in notes:
                    continue
                target_id = link.target.id
                if target_id not in outbound[note.id]:
                    outbound[note.id].append(target_id)
                if note.id not in inbound[target_id]:
                    inbound[target_id].append(note.id)

        return NoteGraph(
            notes=notes,
            outbound=outbound,
            inbound=inbound,
            relationships=self._build_note_relationships(resolved_links),
            note_clusters=self._build_note_clusters(notes),
        )

    def _build_note_relationships(
        self, resolved_links: dict[Note, list[ResolvedLink]]
    ) -> list[NoteRelationship]:
        """Build one relationship per distinct (source, target, link kind).

        Args:
            resolved_links: Every note mapped to its resolved links

        Returns:
            List of NoteRelationship objects
        """
        relationships = []
        seen = set()

        for note, links in resolved_links.items():
            # Code is masked with offsets intact, links inside it do not count
            body = ContentExtractor.mask_code(note.body)
            for link in links:
                if link.target is None:
                    continue

                key = (note.id, link.target.id, link.link.kind)
                if key in seen:
                    continue
                seen.add(key)

                relationship = NoteRelationship(
                    source_note_id=note.id,
                    target_note_id=link.target.id,
                    relationship_type=link.link.kind,
                    context=analyzer.extract_relationship_context(body, link.raw_text),
                    strength=analyzer.calculate_relationship_strength(body, link.raw_text),
                )
                relationships.append(relationship)

        return relationships

    def _build_note_clusters(self, notes: dict[str, Note]) -> dict[str, list[str]]:
        """Build note clusters by folder.

        Args:
            notes: Dictionary of note ID to Note objects

        Returns:
            Dictionary mapping folder paths to lists of note IDs
        """
        note_clusters: dict[str, list[str]] = {}

        for note in notes.values():
            if note.folder_path:
                note_clusters.setdefault(note.folder_path, []).append(note.id)

        return note_clusters
