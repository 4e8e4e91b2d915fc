"""Assemble journey details from a booking reference or a deep link."""

from db_journey_links.application.booking_reference_resolver import (
    BookingReferenceResolver,
    is_booking_reference,
)
from db_journey_links.application.hash_query_extractor import extract_journey_details
from db_journey_links.domain.errors import IncompleteJourneyError
from db_journey_links.domain.models import ExtractionFailure, JourneyDetails
from db_journey_links.domain.ports import EventLogger

UNKNOWN_STATION = "Unknown"
NOT_AVAILABLE = "N/A"


def format_fare_class(fare_class: int | float | None) -> str:
    """Only class 1 is first class; everything else, missing included, is second."""
    return "First" if fare_class == 1 else "Second"


def format_journey_summary(details: JourneyDetails) -> str:
    """One-line summary: ``From: ... | To: ... | Date: ... | Time: ... | Class: ...``."""
    return " | ".join(
        [
            f"From: {details.from_station or UNKNOWN_STATION} "
            f"({details.from_station_id or NOT_AVAILABLE})",
            f"To: {details.to_station or UNKNOWN_STATION} "
            f"({details.to_station_id or NOT_AVAILABLE})",
            f"Date: {details.date or NOT_AVAILABLE}",
            f"Time: {details.time or NOT_AVAILABLE}",
            f"Class: {format_fare_class(details.fare_class)}",
        ]
    )


class JourneyDetailAssembler:
    """Resolves booking references when needed, then extracts and validates details."""

    def __init__(
        self, booking_resolver: BookingReferenceResolver, event_logger: EventLogger
    ) -> None:
        self._booking_resolver = booking_resolver
        self._event_logger = event_logger

    async def resolve_url(self, url: str) -> str:
        """Return the deep link to extract from: resolved for a ``vbid`` URL, else ``url``."""
        if is_booking_reference(url):
            return await self._booking_resolver.resolve(url)
        return url

    async def assemble(self, url: str) -> JourneyDetails | ExtractionFailure:
        """Return validated journey details, or the extractor's failure as-is.

        Raises:
            IncompleteJourneyError: If either station id is missing.
        """
        deep_link = await self.resolve_url(url)
        details = extract_journey_details(deep_link)

        if isinstance(details, ExtractionFailure):
            self._event_logger.error(
                "journey_extraction_failed", error=details.error, details=details.details
            )
            return details

        if not details.is_complete:
            self._event_logger.error(
                "journey_incomplete",
                from_station_id=details.from_station_id,
                to_station_id=details.to_station_id,
            )
            raise IncompleteJourneyError("journeyDetails is missing fromStationId or toStationId")

        self._event_logger.info("journey_details", summary=format_journey_summary(details))
        return details
