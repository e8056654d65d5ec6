"""Test suite for wikilink resolution."""

from vaultgraph.errors import DanglingLinkWarning
from vaultgraph.ingestion.note_store import NoteStore
from vaultgraph.ingestion.relationship_extraction import ReferenceResolver


def test_dangling_link_example(note_store: NoteStore) -> None:
    """Test that a link to a missing note yields one warning and no resolution."""
    note = note_store.ingest("Log on with [[SAP GUI]].", "S4 HANA.md")
    resolver = ReferenceResolver()

    resolved = resolver.resolve(note_store)

    assert len(resolved[note]) == 1
    assert resolved[note][0].is_dangling
    assert resolved[note][0].target is None
    assert resolved[note][0].raw_text == "SAP GUI"
    assert len(resolver.dangling) == 1
    assert isinstance(resolver.dangling[0], DanglingLinkWarning)
    assert resolver.dangling[0].source_id == "S4 HANA.md"
    assert resolver.dangling[0].target == "SAP GUI"


def test_resolves_by_case_insensitive_title(note_store: NoteStore) -> None:
    """Test that [[X]] resolves to a note titled X regardless of case."""
    gui = note_store.ingest("", "SAP/SAP GUI.md")
    source = note_store.ingest("[[sap gui]] and [[SAP GUI#Install|install]]", "S4 HANA.md")

    resolved = ReferenceResolver().resolve(note_store)

    assert [link.target for link in resolved[source]] == [gui, gui]
    assert [link.match for link in resolved[source]] == ["title", "title"]
    assert resolved[gui] == []


def test_resolution_keeps_document_order(note_store: NoteStore) -> None:
    """Test that links keep their order and dangling ones stay in place."""
    note_store.ingest("", "Arrays.md")
    note_store.ingest("", "Loops.md")
    source = note_store.ingest("[[Loops]] [[Missing]] [[Arrays]] [[Loops]]", "Intro.md")

    resolved = ReferenceResolver().resolve(note_store)

    assert [link.raw_text for link in resolved[source]] == ["Loops", "Missing", "Arrays", "Loops"]
    assert [link.target.id if link.target else None for link in resolved[source]] == [
        "Loops.md",
        None,
        "Arrays.md",
        "Loops.md",
    ]


def test_tie_prefers_exact_case_then_first_ingested(note_store: NoteStore) -> None:
    """Test tie breaking between notes that share a title."""
    first_lower = note_store.ingest("", "A/arrays.md")
    exact = note_store.ingest("", "B/Arrays.md")
    note_store.ingest("", "C/ARRAYS.md")
    source = note_store.ingest("[[Arrays]] [[aRRays]]", "Intro.md")

    resolved = ReferenceResolver().resolve(note_store)

    assert resolved[source][0].target == exact
    assert resolved[source][1].target == first_lower


def test_alias_fallback(note_store: NoteStore) -> None:
    """Test that aliases are used only when no title matches."""
    basis = note_store.ingest("---\naliases: [Basis, Admin]\n---\n", "SAP Basis.md")
    admin = note_store.ingest("", "Admin.md")
    source = note_store.ingest("[[basis]] [[Admin]]", "SCCM.md")

    resolved = ReferenceResolver().resolve(note_store)

    assert resolved[source][0].target == basis
    assert resolved[source][0].match == "alias"
    assert resolved[source][1].target == admin
    assert resolved[source][1].match == "title"


def test_path_links(note_store: NoteStore) -> None:
    """Test that links containing a folder resolve against the note path."""
    sap = note_store.ingest("", "SAP/Overview.md")
    note_store.ingest("", "C/Overview.md")
    source = note_store.ingest("[[sap/overview]] [[Nowhere/Overview]]", "Index.md")

    resolver = ReferenceResolver()
    resolved = resolver.resolve(note_store)

    assert resolved[source][0].target == sap
    assert resolved[source][0].match == "path"
    assert resolved[source][1].is_dangling
    assert [warning.target for warning in resolver.dangling] == ["Nowhere/Overview"]


def test_self_links_only_when_written(note_store: NoteStore) -> None:
    """Test that a note links to itself only when it says so."""
    loops = note_store.ingest("See [[Loops]] again.", "Loops.md")
    arrays = note_store.ingest("No links.", "Arrays.md")

    resolved = ReferenceResolver().resolve(note_store)

    assert [link.target for link in resolved[loops]] == [loops]
    assert resolved[arrays] == []


def test_dangling_warnings_reset_between_runs(note_store: NoteStore) -> None:
    """Test that each resolve call reports only its own dangling links."""
    note_store.ingest("[[Missing]]", "Note.md")
    resolver = ReferenceResolver()

    resolver.resolve(note_store)
    resolver.resolve(note_store)

    assert len(resolver.dangling) == 1
