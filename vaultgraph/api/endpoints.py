from typing import Any

from fastapi import APIRouter, HTTPException
from loguru import logger

from vaultgraph.domain.note import Note
from vaultgraph.index_store import IndexStore


def _note_summary(note: Note) -> dict[str, Any]:
    return {
        "note_id": note.id,
        "title": note.title,
        "tags": note.all_tags,
        "url": f"/api/notes/{note.id}",
    }


def _get_note_or_404(index_store: IndexStore, note_id: str) -> Note:
    note = index_store.get_note(note_id)
    if note is None:
        logger.warning(f"Note not found: {note_id}")
        raise HTTPException(status_code=404, detail="Note not found")
    return note


def _create_list_notes_endpoint(index_store: IndexStore):
    """Create the note listing endpoint handler."""

    async def list_notes(tag: str | None = None):
        notes = index_store.list_notes(tag=tag)
        return {"count": len(notes), "notes": [_note_summary(note) for note in notes]}

    return list_notes


def _create_notes_search_endpoint(index_store: IndexStore):
    """Create the notes search endpoint handler."""

    async def search_notes_by_title(title: str):
        """Search for a note by title or alias for wikilink resolution."""
        note = index_store.find_note_by_title(title)
        if note:
            return {**_note_summary(note), "exists": True}
        return {
            "note_id": None,
            "title": title,
            "tags": [],
            "url": None,
            "exists": False,
        }

    return search_notes_by_title


def _create_backlinks_endpoint(index_store: IndexStore):
    """Create the "what links here" endpoint handler."""

    async def get_backlinks(note_id: str):
        _get_note_or_404(index_store, note_id)
        backlinks = index_store.get_backlinks(note_id)
        return {
            "note_id": note_id,
            "count": len(backlinks),
            "backlinks": [_note_summary(note) for note in backlinks],
        }

    return get_backlinks


def _create_note_endpoint(index_store: IndexStore):
    """Create the single note endpoint handler."""

    async def get_note(note_id: str):
        note = _get_note_or_404(index_store, note_id)
        return {
            **_note_summary(note),
            "folder_path": note.folder_path,
            "aliases": list(note.aliases),
            "frontmatter": note.model_dump(mode="json")["frontmatter"],
            "body": note.body,
            "forward_links": [
                _note_summary(target) for target in index_store.get_forward_links(note_id)
            ],
        }

    return get_note


def get_endpoints_router(*, index_store: IndexStore) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/api/links/dangling")
    async def get_dangling_links():
        dangling = index_store.get_dangling_links()
        return {"count": len(dangling), "links": [link.model_dump() for link in dangling]}

    # Fixed paths first, the note_id converter matches slashes
    router.get("/api/notes")(_create_list_notes_endpoint(index_store))
    router.get("/api/notes/search")(_create_notes_search_endpoint(index_store))
    router.get("/api/notes/{note_id:path}/backlinks")(_create_backlinks_endpoint(index_store))
    router.get("/api/notes/{note_id:path}")(_create_note_endpoint(index_store))

    return router
