import logging
from typing import Optional

from fastapi import FastAPI

from jsonstore.api.store import create_store_router
from jsonstore.core.dependencies import get_store
from jsonstore.storage.base import KeyValueStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[KeyValueStore] = None) -> FastAPI:
    """
    Build the HTTP app serving ``store`` under ``/store``.

    Without an argument the process-wide store from ``get_store()`` is used,
    configured through JSONSTORE_DIR and JSONSTORE_NAME.
    """
    if store is None:
        store = get_store()

    app = FastAPI(
        title="JSON Store",
        version="0.1.0",
        description="Read and update a schema-validated JSON file over HTTP.",
    )

    @app.get("/health")
    async def health() -> dict:
        """
        Lightweight health check endpoint.
        """
        return {"status": "ok"}

    app.include_router(create_store_router(store), prefix="/store", tags=["store"])
    logger.info("Serving %r under /store", store)
    return app


if __name__ == "__main__":
    """
    Allow running `python -m jsonstore.main` to start the Uvicorn development server.
    """
    import uvicorn

    uvicorn.run(
        "jsonstore.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=8000,
    )
