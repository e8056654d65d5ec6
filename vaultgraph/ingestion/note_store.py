"""In-memory store of parsed notes."""

from pathlib import Path, PurePosixPath
from typing import Iterator

from loguru import logger

from vaultgraph.domain.note import Note
from vaultgraph.errors import DuplicateNoteError, ParseError

from .content_extractor import ContentExtractor
from .frontmatter import parse_aliases, parse_tags, split_frontmatter


class NoteStore:
    """Holds parsed notes keyed by their vault-relative path, in ingestion order."""

    def __init__(self) -> None:
        self._notes: dict[str, Note] = {}
        self._version = 0
        self.content_extractor = ContentExtractor()

    @property
    def version(self) -> int:
        """Counter bumped on every change, used to detect a stale graph."""
        return self._version

    def ingest(self, raw_text: str, path: str | Path) -> Note:
        """Parse raw note text and add the resulting note to the store.

        Args:
            raw_text: Full markdown text of the note
            path: Vault-relative path of the note, used as its ID

        Returns:
            The created note

        Raises:
            ParseError: If the frontmatter block is malformed
            DuplicateNoteError: If a note with the same ID was already ingested
        """
        note_id = Path(path).as_posix()
        if note_id in self._notes:
            raise DuplicateNoteError(note_id)

        frontmatter, body = split_frontmatter(raw_text, path)
        links = self.content_extractor.extract_links(body)

        parent = PurePosixPath(note_id).parent
        note = Note(
            id=note_id,
            title=PurePosixPath(note_id).stem,
            path=str(path),
            folder_path="" if parent == PurePosixPath(".") else parent.as_posix(),
            frontmatter=frontmatter,
            tags=tuple(parse_tags(frontmatter)),
            inline_tags=tuple(self.content_extractor.extract_inline_tags(body)),
            aliases=tuple(parse_aliases(frontmatter)),
            body=body,
            outbound_links=tuple(
                link for link in links if not self.content_extractor.is_attachment(link.target)
            ),
            embeds=tuple(link.target for link in links if link.kind == "embed"),
        )

        self._notes[note_id] = note
        self._version += 1
        logger.debug(f"Ingested {note_id} with {len(note.outbound_links)} links")
        return note

    def ingest_file(self, file: Path, base_folder: Path) -> Note:
        """Read a markdown file and ingest it under its path relative to the vault."""
        try:
            with open(file, "r", encoding="utf-8") as f:
                raw_text = f.read()
        except UnicodeDecodeError as e:
            raise ParseError(file, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise ParseError(file, f"could not read file: {e}") from e

        return self.ingest(raw_text, file.relative_to(base_folder))

    def remove(self, note_id: str) -> None:
        """Remove a note from the store."""
        if note_id in self._notes:
            del self._notes[note_id]
            self._version += 1

    def get(self, note_id: str) -> Note | None:
        """Get a note by its ID."""
        return self._notes.get(note_id)

    def find_by_title(self, title: str) -> list[Note]:
        """All notes whose title matches case-insensitively, in ingestion order."""
        key = title.strip().casefold()
        return [note for note in self._notes.values() if note.title.casefold() == key]

    def notes_with_tag(self, tag: str) -> list[Note]:
        """All notes carrying a frontmatter or inline tag, case-insensitively."""
        key = tag.lstrip("#").casefold()
        return [
            note
            for note in self._notes.values()
            if any(t.casefold() == key for t in note.all_tags)
        ]

    def clear(self) -> None:
        """Remove every note from the store."""
        self._notes.clear()
        self._version += 1

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes.values()))

    def __len__(self) -> int:
        return len(self._notes)
