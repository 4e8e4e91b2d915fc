"""Structured event logging port."""

from typing import Any, Protocol


class EventLogger(Protocol):
    """Receives leveled events with structured fields."""

    def info(self, event: str, **fields: Any) -> None:
        """Record an informational event."""
        ...

    def error(self, event: str, **fields: Any) -> None:
        """Record an error event."""
        ...
