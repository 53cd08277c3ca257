"""Entry point for the User Query API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``).  Each incoming request is served as its own
task on the server's event loop.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from user_query_api.app.core.config import settings
from user_query_api.app.core.logging_config import setup_logging


async def main() -> None:
    """Serve the application until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(
        app="user_query_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
