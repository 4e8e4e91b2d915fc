"""Domain models for journey link resolution."""

from db_journey_links.domain.models.booking_payload import (
    BookingLookup,
    BookingPayload,
    ReconConnection,
    ReconResponse,
    ReconSection,
    ReconStop,
)
from db_journey_links.domain.models.date_time_parts import DateTimeParts
from db_journey_links.domain.models.journey_details import ExtractionFailure, JourneyDetails
from db_journey_links.domain.models.recon_result import (
    ReconContext,
    ReconFailure,
    ReconResult,
    ReconSuccess,
    StationIds,
)

__all__ = [
    "BookingLookup",
    "BookingPayload",
    "DateTimeParts",
    "ExtractionFailure",
    "JourneyDetails",
    "ReconConnection",
    "ReconContext",
    "ReconFailure",
    "ReconResponse",
    "ReconResult",
    "ReconSection",
    "ReconStop",
    "ReconSuccess",
    "StationIds",
]
