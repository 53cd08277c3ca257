"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  User records live in an in‑memory store (``core.store``),
are resolved by the query service (``services.user_service``) and are
exposed to clients through a GraphQL schema (``gql.schema``)
mounted by the router in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
