"""Ports (interfaces) for the ports-and-adapters architecture."""

from db_journey_links.domain.ports.booking_client import BookingClient
from db_journey_links.domain.ports.cookie_source import CookieSource
from db_journey_links.domain.ports.event_logger import EventLogger
from db_journey_links.domain.ports.journey_assembler import JourneyAssembler

__all__ = [
    "BookingClient",
    "CookieSource",
    "EventLogger",
    "JourneyAssembler",
]
