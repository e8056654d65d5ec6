"""Errors raised while indexing a vault."""

from pathlib import Path


class VaultGraphError(Exception):
    """Base class for vault indexing errors."""


class ParseError(VaultGraphError):
    """Raised when a note cannot be parsed."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        self.message = message
        super().__init__(f"{path}: {message}")


class DuplicateNoteError(VaultGraphError):
    """Raised when a note id is ingested twice into the same store."""

    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__(f"Note already ingested: {note_id}")


class DanglingLinkWarning(UserWarning):
    """A wikilink whose target does not exist in the store.

    Recorded by the resolver, never raised during indexing.
    """

    def __init__(self, source_id: str, target: str) -> None:
        self.source_id = source_id
        self.target = target
        super().__init__(f"Dangling link in {source_id}: [[{target}]]")
