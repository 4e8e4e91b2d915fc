"""Error envelope for API handlers."""

import json
import logging
from collections.abc import Awaitable, Callable

from starlette.responses import JSONResponse, Response

from db_journey_links.domain.errors import JourneyLinkError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


async def api_error_handler(handler: Callable[[], Awaitable[Response]]) -> Response:
    """Run ``handler`` and turn raised errors into ``{"error": ...}`` JSON responses.

    JourneyLinkError keeps its message and status code. Anything else is
    logged with its traceback and answered with a generic 500.
    """
    try:
        return await handler()
    except JourneyLinkError as e:
        if e.status_code >= 500:
            logger.error(f"Request failed: {e}")
        else:
            logger.warning(f"Request rejected: {e}")
        return JSONResponse({"error": str(e)}, status_code=e.status_code)
    except json.JSONDecodeError:
        return JSONResponse({"error": "Request body must be valid JSON"}, status_code=400)
    except Exception:
        logger.exception("Unhandled error while processing request")
        return JSONResponse({"error": INTERNAL_ERROR_MESSAGE}, status_code=500)
