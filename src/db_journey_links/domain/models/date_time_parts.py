"""Decoded date/time token."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DateTimeParts:
    """Date and time recovered from a ``hd`` token. Missing parts are None."""

    date: str | None = None
    time: str | None = None
