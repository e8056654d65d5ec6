import sys

from loguru import logger

from vaultgraph.api import create_app
from vaultgraph.config import settings
from vaultgraph.index_store import LocalIndexStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Serving vault index from {settings.local_index_path}")
index_store = LocalIndexStore(settings.local_index_path)
app = create_app(index_store=index_store)
