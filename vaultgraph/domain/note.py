"""Note domain models."""

from typing import Any, Literal

from pydantic import BaseModel


class LinkRef(BaseModel):
    """A single ``[[...]]`` or ``![[...]]`` occurrence in a note body.

    Attributes:
        raw: Text between the brackets exactly as written
        target: Note name part of the link, e.g. "SAP GUI"
        heading: Heading or block reference after ``#``, if any
        display: Display text after ``|``, if any
        kind: Whether the link was written as a wikilink or an embed
    """

    raw: str
    target: str
    heading: str | None = None
    display: str | None = None
    kind: Literal["wikilink", "embed"] = "wikilink"

    model_config = {"frozen": True}


class Note(BaseModel):
    """Represents a parsed note. Notes are immutable once ingested.

    Attributes:
        id: Unique identifier (vault-relative POSIX path)
        title: Note title taken from the filename stem
        path: File path as given at ingestion
        folder_path: Relative folder path for hierarchical relationships
        frontmatter: Key/values from the YAML frontmatter block
        tags: Frontmatter tags in insertion order
        inline_tags: ``#tags`` found in the body
        aliases: Alternative titles declared in frontmatter
        body: Markdown content after the frontmatter block
        outbound_links: Link references in document order
        embeds: Raw targets of every embed, attachments included
    """

    id: str
    title: str
    path: str
    folder_path: str = ""
    frontmatter: dict[str, Any] = {}
    tags: tuple[str, ...] = ()
    inline_tags: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    body: str = ""
    outbound_links: tuple[LinkRef, ...] = ()
    embeds: tuple[str, ...] = ()

    model_config = {"frozen": True}

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def all_tags(self) -> list[str]:
        """Frontmatter tags followed by inline tags, without duplicates."""
        seen = set()
        result = []
        for tag in self.tags + self.inline_tags:
            key = tag.lower()
            if key not in seen:
                seen.add(key)
                result.append(tag)
        return result
