"""Application services (use cases) for journey link resolution."""

from db_journey_links.application.booking_reference_resolver import BookingReferenceResolver
from db_journey_links.application.datetime_decoder import decode_date_time
from db_journey_links.application.hash_query_extractor import extract_journey_details
from db_journey_links.application.journey_detail_assembler import (
    JourneyDetailAssembler,
    format_journey_summary,
)
from db_journey_links.application.recon_resolver import ReconResolver
from db_journey_links.application.station_token_decoder import (
    decode_station_id,
    decode_station_name,
)

__all__ = [
    "BookingReferenceResolver",
    "JourneyDetailAssembler",
    "ReconResolver",
    "decode_date_time",
    "decode_station_id",
    "decode_station_name",
    "extract_journey_details",
    "format_journey_summary",
]
