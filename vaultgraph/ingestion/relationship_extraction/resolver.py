"""Reference resolution for converting wikilink targets to notes."""

from typing import Callable

from loguru import logger

from vaultgraph.domain.links import ResolvedLink
from vaultgraph.domain.note import LinkRef, Note
from vaultgraph.errors import DanglingLinkWarning
from vaultgraph.ingestion.note_store import NoteStore


class ReferenceResolver:
    """Handles resolution of wikilinks to notes in a store.

    Attributes:
        dangling: Warnings for every link the last ``resolve`` call could not match
    """

    def __init__(self) -> None:
        self.dangling: list[DanglingLinkWarning] = []
        self._notes: list[Note] = []

    def resolve(self, store: NoteStore) -> dict[Note, list[ResolvedLink]]:
        """Resolve the outbound links of every note in the store.

        Args:
            store: Store holding the notes to resolve against

        Returns:
            Mapping of every note to its links in document order, each either
            pointing at a target note or marked dangling
        """
        self.dangling = []
        self._notes = list(store)

        resolved: dict[Note, list[ResolvedLink]] = {}
        for note in self._notes:
            resolved[note] = [self.resolve_link(note, link) for link in note.outbound_links]

        if self.dangling:
            logger.info(f"{len(self.dangling)} dangling links across {len(self._notes)} notes")
        return resolved

    def resolve_link(self, source: Note, link: LinkRef) -> ResolvedLink:
        """Resolve a single link written in the source note."""
        strategies: list[tuple[str, Callable[[Note], list[str]]]] = [
            ("title", lambda note: [note.title]),
            ("alias", lambda note: list(note.aliases)),
        ]
        if "/" in link.target:
            strategies.insert(0, ("path", _path_without_extension))

        for match_kind, names_of in strategies:
            target = self._match(link.target, names_of)
            if target is not None:
                return ResolvedLink(source_id=source.id, link=link, target=target, match=match_kind)

        warning = DanglingLinkWarning(source.id, link.target)
        self.dangling.append(warning)
        logger.warning(f"Could not resolve wikilink: [[{link.target}]] in {source.id}")
        return ResolvedLink(source_id=source.id, link=link)

    def _match(self, target: str, names_of: Callable[[Note], list[str]]) -> Note | None:
        """Find the note one of whose names equals target case-insensitively.

        Ties are broken by preferring an exact-case match, then the
        first-ingested note.
        """
        wanted = target.strip()
        folded = wanted.casefold()
        first_match = None
        for note in self._notes:
            names = names_of(note)
            if wanted in names:
                return note
            if first_match is None and any(name.casefold() == folded for name in names):
                first_match = note
        return first_match


def _path_without_extension(note: Note) -> list[str]:
    return [note.id[:-3] if note.id.lower().endswith(".md") else note.id]
