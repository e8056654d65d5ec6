"""Orchestration service for the complete indexing pass."""

from pathlib import Path

from loguru import logger

from vaultgraph.domain.graph import NoteGraph
from vaultgraph.domain.links import DanglingLink, ResolvedLink
from vaultgraph.domain.note import Note
from vaultgraph.domain.report import IndexReport, ParseFailure
from vaultgraph.errors import ParseError

from .note_store import NoteStore
from .relationship_extraction import ReferenceResolver, RelationshipGraphBuilder


class VaultIndexer:
    """Orchestrates the indexing pipeline from a vault folder to a note graph."""

    def __init__(
        self,
        *,
        store: NoteStore | None = None,
        resolver: ReferenceResolver | None = None,
        graph_builder: RelationshipGraphBuilder | None = None,
        exclude_folders: list[str] | None = None,
    ):
        """Initialize the indexer with its services.

        Args:
            store: Note store to fill, a fresh one by default
            resolver: Resolver turning wikilinks into note references
            graph_builder: Builder for the note graph
            exclude_folders: Folder names never descended into
        """
        self.store = store or NoteStore()
        self.resolver = resolver or ReferenceResolver()
        self.graph_builder = graph_builder or RelationshipGraphBuilder()
        self.exclude_folders = (
            exclude_folders if exclude_folders is not None else [".obsidian", ".trash"]
        )

        self.resolved_links: dict[Note, list[ResolvedLink]] = {}
        self.last_report = IndexReport()
        self._graph: NoteGraph | None = None
        self._graph_version = -1

    def index(self, folder: Path) -> IndexReport:
        """Parse every markdown file in the folder and rebuild the graph.

        Notes with malformed frontmatter are logged, recorded in the report
        and skipped. Dangling links are recorded but do not stop the pass.

        Args:
            folder: Root folder of the vault

        Returns:
            IndexReport summarising the pass
        """
        files = self._get_all_markdown_files_for_ingestion(folder)
        logger.info(f"Found {len(files)} markdown files in {folder}")

        self.store.clear()
        parse_errors = []
        for file in files:
            logger.debug(f"Processing {file}")
            try:
                self.store.ingest_file(file, folder)
            except ParseError as e:
                relative_path = file.relative_to(folder).as_posix()
                logger.warning(f"Skipping {relative_path}: {e.message}")
                parse_errors.append(ParseFailure(path=relative_path, message=e.message))

        logger.info("Rebuilding relationship graph...")
        graph = self.graph

        self.last_report = IndexReport(
            notes_indexed=len(self.store),
            parse_errors=parse_errors,
            dangling_links=self.dangling_links,
            relationships=len(graph.relationships),
        )

        logger.info("Indexing complete:")
        logger.info(f"  - Total files: {len(files)}")
        logger.info(f"  - Indexed: {self.last_report.notes_indexed}")
        logger.info(f"  - Skipped: {len(parse_errors)}")
        logger.info(f"  - Dangling links: {len(self.last_report.dangling_links)}")
        logger.info(f"  - Relationships: {self.last_report.relationships}")

        return self.last_report

    @property
    def graph(self) -> NoteGraph:
        """The note graph, recomputed whenever the store changed since the last build."""
        if self._graph is None or self._graph_version != self.store.version:
            self._graph = self._rebuild_graph()
        return self._graph

    @property
    def dangling_links(self) -> list[DanglingLink]:
        """Dangling links found while building the current graph."""
        self.graph  # rebuilds when stale, refreshing resolver.dangling
        return [
            DanglingLink(source_id=warning.source_id, target=warning.target)
            for warning in self.resolver.dangling
        ]

    def _rebuild_graph(self) -> NoteGraph:
        self.resolved_links = self.resolver.resolve(self.store)
        self._graph_version = self.store.version
        return self.graph_builder.build_graph(self.resolved_links)

    def _get_all_markdown_files_for_ingestion(self, folder: Path) -> list[Path]:
        """Get all markdown files suitable for ingestion.

        Args:
            folder: Root folder of the vault

        Returns:
            Sorted list of markdown files, excluding excalidraw drawings and
            anything under an excluded folder
        """
        files = []
        for file in sorted(folder.rglob("*.md")):
            relative_parts = file.relative_to(folder).parts[:-1]
            if any(part in self.exclude_folders for part in relative_parts):
                continue
            if not file.is_file() or file.name.endswith(".excalidraw.md"):
                continue
            files.append(file)
        return files
