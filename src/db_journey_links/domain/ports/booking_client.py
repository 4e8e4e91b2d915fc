"""Booking service port."""

from typing import Protocol

from db_journey_links.domain.models.booking_payload import (
    BookingLookup,
    BookingPayload,
    ReconResponse,
)


class BookingClient(Protocol):
    """Port for the remote booking service."""

    async def fetch_connection(self, vbid: str) -> BookingLookup:
        """Look up a booking reference.

        Raises:
            UpstreamFetchError: If the service is unreachable or the body is invalid.
        """
        ...

    async def fetch_recon_connections(
        self, vbid: str, payload: BookingPayload, cookies: list[str]
    ) -> ReconResponse:
        """Reconstruct the itinerary of a booking with the forwarded session cookies."""
        ...
