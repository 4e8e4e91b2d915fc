"""EventLogger implementations backed by the standard logging module."""

import logging
from typing import Any


def _format_fields(fields: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items() if value is not None)


class LoggingEventLogger:
    """Forwards events to a stdlib logger.

    Fields are rendered as ``key=value`` pairs in the message and passed as
    ``extra`` under ``event_fields`` for structured handlers.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("db_journey_links.events")

    def _log(self, level: int, event: str, fields: dict[str, Any]) -> None:
        rendered = _format_fields(fields)
        message = f"{event} {rendered}" if rendered else event
        self._logger.log(level, message, extra={"event": event, "event_fields": fields})

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, fields)


class NullEventLogger:
    """Discards every event."""

    def info(self, event: str, **fields: Any) -> None:
        pass

    def error(self, event: str, **fields: Any) -> None:
        pass
