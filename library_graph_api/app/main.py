"""
Main entrypoint for the Library Graph API.

This module assembles the FastAPI application: it sets up logging,
builds the in‑memory store, mounts the GraphQL router and includes
the versioned REST routes.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn library_graph_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import LibraryStore
from .graphql.router import create_graphql_router

logger = logging.getLogger(__name__)


def create_app(store: Optional[LibraryStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[LibraryStore]
        Store the application serves.  When omitted a new one is
        built, seeded with the sample data unless
        ``settings.seed_sample_data`` is off.

    Returns
    -------
    FastAPI
        A configured FastAPI instance.  The store is also available
        as ``app.state.store``.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = LibraryStore.with_sample_data() if settings.seed_sample_data else LibraryStore()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store

    app.include_router(
        create_graphql_router(store, graphiql=settings.graphiql),
        prefix=settings.graphql_path,
    )
    app.include_router(v1_router, prefix="/api/v1")

    logger.info(
        "Serving GraphQL on %s with %d authors and %d books",
        settings.graphql_path,
        len(store.authors),
        len(store.books),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
