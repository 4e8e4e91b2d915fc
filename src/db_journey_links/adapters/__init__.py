"""Adapters layer - external system integrations."""

from db_journey_links.adapters.bahn_api import BahnHttpClient
from db_journey_links.adapters.config import AppConfig
from db_journey_links.adapters.event_logging import LoggingEventLogger, NullEventLogger

__all__ = [
    "AppConfig",
    "BahnHttpClient",
    "LoggingEventLogger",
    "NullEventLogger",
]
