"""CLI for indexing a vault of markdown notes and saving the note graph to a local index file"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from vaultgraph.config import settings
from vaultgraph.domain.report import IndexReport
from vaultgraph.index_store import LocalIndexStore
from vaultgraph.ingestion.orchestrator import VaultIndexer


def main(in_folder: str, local_outfile_index: str) -> IndexReport:
    folder = Path(in_folder)
    index_store = LocalIndexStore(filepath=Path(local_outfile_index))

    indexer = VaultIndexer(exclude_folders=settings.exclude_folders)
    report = indexer.index(folder)

    index_store.update(indexer.graph, report)
    index_store.save()
    logger.info(f"Saved index to {local_outfile_index}")
    return report


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-folder",
        type=str,
        required=False,
        help="Folder containing markdown files",
        default=str(settings.notes_dir),
    )
    parser.add_argument(
        "--outfile",
        type=str,
        required=False,
        help="Local output index file",
        default=settings.local_index_path,
    )

    args = parser.parse_args()

    main(in_folder=args.in_folder, local_outfile_index=args.outfile)
