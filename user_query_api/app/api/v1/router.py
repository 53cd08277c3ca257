"""
Top‑level router for version 1 of the API.

The GraphQL router is mounted under the configured endpoint path
(``/gql`` by default).
"""

from fastapi import APIRouter

from user_query_api.app.core.config import settings
from .endpoints import graphql

router = APIRouter()

router.include_router(graphql.router, prefix=settings.graphql_path, tags=["graphql"])
