"""Resolved link domain models."""

from typing import Literal

from pydantic import BaseModel

from vaultgraph.domain.note import LinkRef, Note


class ResolvedLink(BaseModel):
    """Outcome of resolving one link occurrence against the note store."""

    source_id: str
    link: LinkRef
    target: Note | None = None
    match: Literal["path", "title", "alias"] | None = None

    model_config = {"frozen": True}

    @property
    def raw_text(self) -> str:
        return self.link.target

    @property
    def is_dangling(self) -> bool:
        return self.target is None


class DanglingLink(BaseModel):
    """Serializable record of a link whose target was not found."""

    source_id: str
    target: str
