"""Entry point for serving the Social Media API.

Starts the FastAPI application with Uvicorn.  Host, port and the
database location are read from environment variables (``HOST``,
``PORT``, ``DATABASE_URL``); see ``social_media_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
