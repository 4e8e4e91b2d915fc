"""Decode ``hd`` date or date-time tokens."""

from db_journey_links.domain.models import DateTimeParts

_DATE_TIME_SEPARATOR = "T"
_OFFSET_MARKERS = ("+", "-")


def decode_date_time(token: str | None) -> DateTimeParts:
    """Split a token such as ``2024-05-01T09:15:00+02:00`` into date and ``HH:MM``.

    The date is passed through untouched. Any UTC offset and the seconds are
    dropped from the time; no padding is added. A token without ``T`` is a
    plain date. Missing pieces come back as None, never as an error.
    """
    if not token:
        return DateTimeParts()

    if _DATE_TIME_SEPARATOR not in token:
        return DateTimeParts(date=token)

    parts = token.split(_DATE_TIME_SEPARATOR)
    date_part, time_part = parts[0], parts[1]

    for marker in _OFFSET_MARKERS:
        time_part = time_part.split(marker)[0]

    time_fields = time_part.split(":")
    time = None
    if len(time_fields) >= 2 and time_fields[0] and time_fields[1]:
        time = f"{time_fields[0]}:{time_fields[1]}"

    return DateTimeParts(date=date_part or None, time=time)
