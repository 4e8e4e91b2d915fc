"""Decode ``soid``/``zoid`` station tokens.

A token is either a bare numeric station id (``8000001``) or a HAFAS
location-id string such as ``A=1@O=Aachen Hbf@X=6091495@Y=50767803@L=8000001@``.
Decoding never raises; anything undecodable yields None.
"""

import logging
import re
from urllib.parse import unquote

logger = logging.getLogger(__name__)

_LOCATION_ID_PATTERN = re.compile(r"@L=(\d+)")
_ORIGIN_NAME_PATTERN = re.compile(r"@O=([^@]+)")
_NUMERIC_PATTERN = re.compile(r"\d+")
_LOCATION_ID_MARKER = "@L="


def _clean_name(raw: str) -> str | None:
    name = unquote(raw, errors="strict").replace("+", " ").strip()
    return name or None


def decode_station_id(token: str | None) -> str | None:
    """Return the numeric station id carried by a token, if any."""
    if not token:
        return None
    try:
        match = _LOCATION_ID_PATTERN.search(token)
        if match:
            return match.group(1)
        if _NUMERIC_PATTERN.fullmatch(token):
            return token
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not decode station id from {token!r}: {e}")
    return None


def decode_station_name(token: str | None) -> str | None:
    """Return the human-readable station name carried by a token, if any.

    Prefers the ``@O=`` field. A bare numeric id has no name. Anything else
    is taken as a plain (possibly percent-encoded) name, cut at ``@L=``.
    """
    if not token:
        return None
    try:
        match = _ORIGIN_NAME_PATTERN.search(token)
        if match:
            return _clean_name(match.group(1))

        if _NUMERIC_PATTERN.fullmatch(token):
            return None

        return _clean_name(token.split(_LOCATION_ID_MARKER, 1)[0])
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not decode station name from {token!r}: {e}")
    return None
