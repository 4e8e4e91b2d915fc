"""Starlette application for resolving journey links."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from db_journey_links.adapters.web.error_handler import api_error_handler
from db_journey_links.adapters.web.rate_limit_middleware import RateLimitMiddleware
from db_journey_links.domain.errors import MissingParameterError
from db_journey_links.domain.models import ExtractionFailure
from db_journey_links.domain.ports import JourneyAssembler

if TYPE_CHECKING:
    from db_journey_links.adapters.config import AppConfig

AssemblerProvider = Callable[[], JourneyAssembler]


class ParseUrlEndpoint:
    """``POST /api/parse-url`` with body ``{"url": "..."}``."""

    def __init__(self, assembler_provider: AssemblerProvider) -> None:
        self._assembler_provider = assembler_provider

    async def handle(self, request: Request) -> Response:
        return await api_error_handler(lambda: self._handle(request))

    async def _handle(self, request: Request) -> Response:
        body = await request.json()
        url = body.get("url") if isinstance(body, dict) else None
        if not url or not isinstance(url, str):
            raise MissingParameterError("url")

        journey_details = await self._assembler_provider().assemble(url)
        if isinstance(journey_details, ExtractionFailure):
            return JSONResponse(journey_details.to_dict(), status_code=400)

        return JSONResponse({"success": True, "journeyDetails": journey_details.to_dict()})


async def health(_request: Request) -> Response:
    return JSONResponse({"status": "ok"})


def create_app(
    config: "AppConfig",
    assembler_provider: AssemblerProvider,
    lifespan: Callable[[Starlette], Any] | None = None,
) -> Starlette:
    """Build the Starlette app.

    Args:
        config: Application configuration.
        assembler_provider: Returns the assembler to use for a request. A provider
            rather than an instance so the assembler can be built inside ``lifespan``.
        lifespan: Optional lifespan context, e.g. one owning the aiohttp session.
    """
    middleware = []
    if config.rate_limit_per_minute > 0:
        middleware.append(
            Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
        )

    routes = [
        Route("/api/parse-url", ParseUrlEndpoint(assembler_provider).handle, methods=["POST"]),
        Route("/healthz", health, methods=["GET"]),
    ]
    return Starlette(routes=routes, middleware=middleware, lifespan=lifespan)
