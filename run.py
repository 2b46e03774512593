"""Entry point for the Record Store API.

Starts the FastAPI application with Uvicorn.  Configuration (record
type, host, port, log level, demo data) is read from environment
variables by ``record_store_api.app.core.config``; see that module for
the full list.

Usage:
    RECORD_TYPE=users SEED_DEMO_DATA=1 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from record_store_api.app.core.config import settings
from record_store_api.app.main import app


async def run_api() -> None:
    """Serve the API on ``settings.host``:``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
