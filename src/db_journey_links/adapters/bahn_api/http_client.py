"""HTTP client for the bahn.de booking API."""

import logging
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote, urlencode

import aiohttp
from pydantic import BaseModel, ValidationError

from db_journey_links.adapters.api_request_logger import log_api_request
from db_journey_links.adapters.bahn_api.constants import (
    BOOKING_START_PATH,
    CONNECTION_PATH,
    DEFAULT_HEADERS,
    RECON_CLASS,
    RECON_PATH,
    RECON_TRAVELLERS,
)
from db_journey_links.adapters.bahn_api.cookies import build_cookie_header, cookie_source_for
from db_journey_links.domain.errors import UpstreamFetchError
from db_journey_links.domain.models import BookingLookup, BookingPayload, ReconResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from db_journey_links.adapters.config import AppConfig


class BahnHttpClient:
    """Booking service client implementing the BookingClient port."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = "https://www.bahn.de",
        timeout_seconds: float = 10.0,
        user_agent: str | None = None,
        log_requests: bool | None = None,
    ) -> None:
        """Initialize with an aiohttp session owned by the caller.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Booking service base URL without trailing slash.
            timeout_seconds: Total timeout per request.
            user_agent: Optional User-Agent header.
            log_requests: Log outgoing requests; None defers to DBJL_LOG_REQUESTS.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent
        self._log_requests = log_requests

    @classmethod
    def from_config(cls, session: "ClientSession", config: "AppConfig") -> "BahnHttpClient":
        """Build a client from application configuration."""
        return cls(
            session,
            base_url=config.bahn_base_url,
            timeout_seconds=config.http_timeout_seconds,
            user_agent=config.user_agent,
            log_requests=config.log_requests,
        )

    def connection_url(self, vbid: str) -> str:
        return f"{self._base_url}{CONNECTION_PATH}/{quote(vbid, safe='')}"

    def _referer(self, vbid: str) -> str:
        return f"{self._base_url}{BOOKING_START_PATH}?{urlencode({'vbid': vbid})}"

    async def _read_json(self, response: "ClientResponse", url: str) -> Any:
        """Return the JSON body of a 200 response, else raise UpstreamFetchError."""
        if response.status != 200:
            body = await response.text()
            logger.error(
                f"Booking service returned status {response.status} for {url}: {body[:200]}"
            )
            raise UpstreamFetchError(
                f"Booking service returned status {response.status}",
                upstream_status=response.status,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise UpstreamFetchError("Booking service returned invalid JSON", cause=e) from e

    @staticmethod
    def _validate(model: type[M], data: Any, url: str) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected payload from {url}: {e.error_count()} validation error(s)")
            raise UpstreamFetchError(
                f"Booking service payload did not match {model.__name__}", cause=e
            ) from e

    async def fetch_connection(self, vbid: str) -> BookingLookup:
        """Look up a booking reference and collect its session cookies.

        Raises:
            UpstreamFetchError: On transport errors, non-200 status or invalid payload.
        """
        url = self.connection_url(vbid)
        log_api_request("GET", url, headers=self._headers, enabled=self._log_requests)

        try:
            async with self._session.get(
                url, headers=self._headers, timeout=self._timeout
            ) as response:
                data = await self._read_json(response, url)
                cookies = cookie_source_for(response.headers).forwardable_cookies()
        except aiohttp.ClientError as e:
            logger.warning(f"Error fetching booking {vbid}: {e}")
            raise UpstreamFetchError("Booking service unreachable", cause=e) from e
        except TimeoutError as e:
            raise UpstreamFetchError("Booking service timed out", cause=e) from e

        payload = self._validate(BookingPayload, data, url)
        logger.debug(f"Booking {vbid} returned {len(cookies)} cookie(s)")
        return BookingLookup(payload=payload, cookies=cookies)

    async def fetch_recon_connections(
        self, vbid: str, payload: BookingPayload, cookies: list[str]
    ) -> ReconResponse:
        """Reconstruct the booked itinerary from its recon context.

        Raises:
            UpstreamFetchError: On transport errors, non-200 status or invalid payload.
        """
        url = f"{self._base_url}{RECON_PATH}"
        headers = {
            **self._headers,
            "Content-Type": "application/json",
            "Referer": self._referer(vbid),
        }
        cookie_header = build_cookie_header(cookies)
        if cookie_header:
            headers["Cookie"] = cookie_header

        body = {
            "ctxRecon": payload.hinfahrt_recon,
            "klasse": RECON_CLASS,
            "reisende": RECON_TRAVELLERS,
            "reservierungsKontingenteVorhanden": False,
        }
        log_api_request("POST", url, headers=headers, payload=body, enabled=self._log_requests)

        try:
            async with self._session.post(
                url, json=body, headers=headers, timeout=self._timeout
            ) as response:
                data = await self._read_json(response, url)
        except aiohttp.ClientError as e:
            logger.warning(f"Error reconstructing booking {vbid}: {e}")
            raise UpstreamFetchError("Recon service unreachable", cause=e) from e
        except TimeoutError as e:
            raise UpstreamFetchError("Recon service timed out", cause=e) from e

        return self._validate(ReconResponse, data, url)
