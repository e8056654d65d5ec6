import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from vaultgraph.api import create_app
from vaultgraph.index_store import LocalIndexStore
from vaultgraph.ingestion.note_store import NoteStore
from vaultgraph.ingestion.orchestrator import VaultIndexer


@pytest.fixture
def temp_notes_base() -> Generator[Path, None, None]:
    """Create a temporary notes directory structure
    used when testing the ingestion and parsing of notes.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def notes_directory(temp_notes_base: Path) -> Path:
    """Create notes subdirectory."""
    notes_dir = temp_notes_base / "notes"
    notes_dir.mkdir()
    return notes_dir


@pytest.fixture
def vault(notes_directory: Path) -> Path:
    """A small vault with SAP and C notes, one malformed note and a dangling link."""
    sap_dir = notes_directory / "SAP"
    sap_dir.mkdir()
    c_dir = notes_directory / "C"
    c_dir.mkdir()

    (sap_dir / "S4 HANA.md").write_text(
        "---\ntags: [sap, erp]\n---\n# S4 HANA\nThe client is [[SAP GUI]]. See [[SAP Basis]].\n"
    )
    (sap_dir / "SAP Basis.md").write_text(
        "---\ntags:\n  - sap\naliases: [Basis]\n---\nAdministers [[s4 hana|S/4]].\n"
    )
    (notes_directory / "SCCM.md").write_text("Systems management, compare with [[Basis]].\n")
    (c_dir / "Arrays.md").write_text(
        "#c Arrays hold values.\n```c\nint a[[2]] = {0};\n```\nSee [[Structs#Arrays of structs]].\n"
    )
    (c_dir / "Structs.md").write_text("---\ntags: c\n---\nStructs group fields. ![[struct.png]]\n")
    (c_dir / "Pointers.md").write_text("---\ntags: [c\n---\nBroken frontmatter.\n")
    (notes_directory / "Unterminated.md").write_text("---\ntags: [draft]\nNo closing line.\n")

    obsidian_dir = notes_directory / ".obsidian"
    obsidian_dir.mkdir()
    (obsidian_dir / "workspace.md").write_text("[[Ignored]]")

    return notes_directory


@pytest.fixture
def note_store() -> NoteStore:
    return NoteStore()


@pytest.fixture
def indexed_vault(vault: Path) -> VaultIndexer:
    """An indexer that has already indexed the sample vault."""
    indexer = VaultIndexer()
    indexer.index(vault)
    return indexer


@pytest.fixture
def index_store(indexed_vault: VaultIndexer) -> LocalIndexStore:
    return LocalIndexStore.from_data(graph=indexed_vault.graph, report=indexed_vault.last_report)


@pytest.fixture
def test_client(index_store: LocalIndexStore) -> TestClient:
    """Create test client over the indexed sample vault."""
    app = create_app(index_store=index_store)
    return TestClient(app)
