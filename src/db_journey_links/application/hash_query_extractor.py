"""Extract journey details from the fragment of a DB deep link.

Deep links look like
``https://www.bahn.de/buchung/fahrplan/suche#soid=...&zoid=...&hd=...&ht=...&kl=2``.
Pure function, no I/O.
"""

import logging
import math
import re
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from db_journey_links.application.datetime_decoder import decode_date_time
from db_journey_links.application.station_token_decoder import (
    decode_station_id,
    decode_station_name,
)
from db_journey_links.domain.models import ExtractionFailure, JourneyDetails

logger = logging.getLogger(__name__)

EXTRACTION_ERROR_MESSAGE = "Failed to extract journey details"

_LEADING_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")


def parse_fare_class(value: str) -> int | float:
    """Parse ``kl`` like a base-10 ``parseInt``: leading digits count, else NaN."""
    match = _LEADING_INTEGER_PATTERN.match(value)
    if not match:
        return math.nan
    return int(match.group(1))


def parse_fragment(url: str) -> dict[str, str]:
    """Return the fragment of ``url`` as a flat query mapping (first value wins).

    Raises:
        ValueError: If ``url`` is not an absolute URL.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Invalid URL: {url!r}")

    params: dict[str, str] = {}
    for key, value in parse_qsl(parts.fragment, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def extract_journey_details(url: str) -> JourneyDetails | ExtractionFailure:
    """Build JourneyDetails from the ``soid``/``zoid``/``hd``/``ht``/``kl`` fragment fields.

    A time embedded in ``hd`` wins over a separate ``ht``. Any parsing error
    returns an ExtractionFailure carrying the error text.
    """
    try:
        params = parse_fragment(url)
        fields: dict[str, Any] = {}

        origin = params.get("soid")
        if origin:
            fields["from_station_id"] = decode_station_id(origin)
            fields["from_station"] = decode_station_name(origin)

        destination = params.get("zoid")
        if destination:
            fields["to_station_id"] = decode_station_id(destination)
            fields["to_station"] = decode_station_name(destination)

        date_time = decode_date_time(params.get("hd"))
        if date_time.date:
            fields["date"] = date_time.date
        if date_time.time and not fields.get("time"):
            fields["time"] = date_time.time

        explicit_time = params.get("ht")
        if explicit_time and not fields.get("time"):
            fields["time"] = explicit_time

        fare_class = params.get("kl")
        if fare_class:
            fields["fare_class"] = parse_fare_class(fare_class)

        return JourneyDetails(**fields)
    except (ValueError, TypeError, UnicodeError) as e:
        logger.error(f"Error extracting journey details: {e}")
        return ExtractionFailure(error=EXTRACTION_ERROR_MESSAGE, details=str(e))
