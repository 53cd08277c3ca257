"""
Main entrypoint for the User Query API.

This module assembles the FastAPI application: it sets up logging,
seeds the user store, builds the GraphQL schema and includes the
versioned router.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``::

    uvicorn user_query_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import UserStore, load_seed_users
from .gql.schema import build_schema
from .services.user_service import UserQueryService
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve queries from.  When omitted, a store is seeded
        from ``settings.users_seed_file`` (or the built‑in users).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = UserStore(load_seed_users(settings.users_seed_file or None))

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("User store ready with %d users; GraphQL endpoint at %s", len(store), settings.graphql_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # One service and one schema per application, shared by all requests.
    app.state.user_store = store
    app.state.graphql_schema = build_schema(UserQueryService(store))

    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
