"""Entry point for the String Service HTTP server.

Serves ``string_service.app.main:app`` with Uvicorn.  Host, port and
log level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
the defaults listen on ``0.0.0.0:3090``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from string_service.app.core.config import settings
from string_service.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
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
