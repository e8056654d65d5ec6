"""Relationship extraction module for resolving note links and building the note graph."""

from vaultgraph.ingestion.relationship_extraction.graph_builder import RelationshipGraphBuilder
from vaultgraph.ingestion.relationship_extraction.resolver import ReferenceResolver

__all__ = [
    "ReferenceResolver",
    "RelationshipGraphBuilder",
]
