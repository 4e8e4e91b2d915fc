"""Domain layer - journey models, errors and ports."""

from db_journey_links.domain.errors import (
    IncompleteJourneyError,
    JourneyLinkError,
    MissingParameterError,
    ReconResolutionError,
    UpstreamFetchError,
)
from db_journey_links.domain.models import (
    BookingLookup,
    BookingPayload,
    ExtractionFailure,
    JourneyDetails,
    StationIds,
)
from db_journey_links.domain.ports import BookingClient, CookieSource, EventLogger

__all__ = [
    "BookingClient",
    "BookingLookup",
    "BookingPayload",
    "CookieSource",
    "EventLogger",
    "ExtractionFailure",
    "IncompleteJourneyError",
    "JourneyDetails",
    "JourneyLinkError",
    "MissingParameterError",
    "ReconResolutionError",
    "StationIds",
    "UpstreamFetchError",
]
