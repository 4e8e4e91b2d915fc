"""Wiring of adapters and application services."""

from typing import TYPE_CHECKING

from db_journey_links.adapters.bahn_api import BahnHttpClient
from db_journey_links.adapters.event_logging import LoggingEventLogger
from db_journey_links.application import (
    BookingReferenceResolver,
    JourneyDetailAssembler,
    ReconResolver,
)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from db_journey_links.adapters.config import AppConfig
    from db_journey_links.domain.ports import EventLogger


def build_assembler(
    session: "ClientSession",
    config: "AppConfig",
    event_logger: "EventLogger | None" = None,
) -> JourneyDetailAssembler:
    """Build a JourneyDetailAssembler talking to the booking service over ``session``."""
    event_logger = event_logger or LoggingEventLogger()
    booking_client = BahnHttpClient.from_config(session, config)
    recon_resolver = ReconResolver.with_default_strategies(booking_client, event_logger)
    booking_resolver = BookingReferenceResolver(booking_client, recon_resolver, event_logger)
    return JourneyDetailAssembler(booking_resolver, event_logger)
