"""Main entry point for the journey links API server."""

import asyncio
import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp
import uvicorn
from starlette.applications import Starlette

from db_journey_links.adapters.config import AppConfig
from db_journey_links.adapters.web import create_app
from db_journey_links.application import JourneyDetailAssembler
from db_journey_links.bootstrap import build_assembler

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the server and CLI."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def create_application(config: AppConfig) -> Starlette:
    """Build the app; one aiohttp session lives as long as the app does."""
    assemblers: list[JourneyDetailAssembler] = []

    def current_assembler() -> JourneyDetailAssembler:
        if not assemblers:
            raise RuntimeError("Application has not started")
        return assemblers[0]

    @asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        async with aiohttp.ClientSession() as session:
            assemblers.append(build_assembler(session, config))
            logger.info(f"Booking service: {config.bahn_base_url}")
            try:
                yield
            finally:
                assemblers.clear()
                logger.info("Shutting down...")

    return create_app(config, current_assembler, lifespan=lifespan)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    app = create_application(config)
    server = uvicorn.Server(
        uvicorn.Config(app, host=config.host, port=config.port, reload=config.reload)
    )
    logger.info(f"Serving on http://{config.host}:{config.port}")
    await server.serve()


def server_main() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    server_main()
