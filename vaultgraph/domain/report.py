"""Index report domain models."""

from pydantic import BaseModel

from vaultgraph.domain.links import DanglingLink


class ParseFailure(BaseModel):
    """A note skipped because it could not be parsed."""

    path: str
    message: str


class IndexReport(BaseModel):
    """Summary of a single indexing pass over a vault."""

    notes_indexed: int = 0
    parse_errors: list[ParseFailure] = []
    dangling_links: list[DanglingLink] = []
    relationships: int = 0
