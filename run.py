"""Entry point for the Guest List API server.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (see
``guest_list_api.app.core.config``); defaults are ``0.0.0.0`` and
``5000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from guest_list_api.app.core.config import settings
from guest_list_api.app.main import app


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
        logging.getLogger(__name__).info("Guest list server stopped")
