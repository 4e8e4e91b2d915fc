"""Event logger adapters."""

from db_journey_links.adapters.event_logging.event_logger import LoggingEventLogger, NullEventLogger

__all__ = ["LoggingEventLogger", "NullEventLogger"]
