"""Entry point for serving the landing page API.

Launches the FastAPI application with Uvicorn.  Host, port and log
level come from ``caringiq_api.app.core.config.settings`` and can be
overridden with the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from caringiq_api.app.core.config import settings
from caringiq_api.app.main import app


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
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
