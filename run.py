"""Entry point for the Calculation API server.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port and log level are read from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``calculation_api/app/core/config.py``
for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from calculation_api.app.core.config import Settings
from calculation_api.app.core.logging_config import normalize_level
from calculation_api.app.main import create_app


async def run_api(app_settings: Settings) -> None:
    """Serve the API until the server is stopped."""
    config = Config(
        app=create_app(app_settings=app_settings),
        host=app_settings.host,
        port=app_settings.port,
        reload=False,
        log_level=normalize_level(app_settings.log_level),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    app_settings = Settings.from_env()
    try:
        await run_api(app_settings)
    except Exception:
        logging.exception("Calculation API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
