from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vaultgraph.api.endpoints import get_endpoints_router
from vaultgraph.index_store import IndexStore


def create_app(*, index_store: IndexStore) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(index_store=index_store))

    return app
