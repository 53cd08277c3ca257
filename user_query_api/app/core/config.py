"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the built‑in seed users and no extra setup.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Query API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file that receives a copy of all log records.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the ASGI server binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Single endpoint accepting GraphQL documents.  The SDL of the schema
    # is served under ``<graphql_path>/schema``.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/gql")

    # Optional JSON file with an array of user objects.  When empty, the
    # built‑in fixture from ``core.store`` is used.
    users_seed_file: str = os.getenv("USERS_SEED_FILE", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
