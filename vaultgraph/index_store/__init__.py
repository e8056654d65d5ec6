from vaultgraph.index_store.base import IndexStore
from vaultgraph.index_store.local import LocalIndexStore

__all__ = ["IndexStore", "LocalIndexStore"]
