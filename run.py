"""Entry point for running the Catalog API.

Starts the FastAPI application with Uvicorn.  Host, port, database
location and log level come from the environment, see
``catalog_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
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
