"""Strategies that recover origin/destination tokens from a booking.

The booking payload carries ``hinfahrtRecon``, a HAFAS reconstruction
context: ``¶``-delimited sections such as ``¶HKI¶...¶KC¶...¶SC¶...¶``.
Three independent strategies read it, from most to least reliable:

1. ``structured``: ask the booking service to reconstruct the itinerary.
2. ``hki``: scrape ``@L=<7+ digits>`` markers from the context.
3. ``sc_json``: decode the JSON blob of the ``SC`` section.

Each strategy returns a ReconResult instead of raising.
"""

import base64
import binascii
import gzip
import json
import re
from collections.abc import Iterator
from typing import Any, Protocol

from db_journey_links.domain.models import (
    ReconContext,
    ReconFailure,
    ReconResponse,
    ReconResult,
    ReconSuccess,
    StationIds,
)
from db_journey_links.domain.ports import BookingClient

SECTION_DELIMITER = "¶"
SC_SECTION = "SC"

_HKI_LOCATION_ID_PATTERN = re.compile(r"@L=(\d{7,})")
_LOCATION_ID_PATTERN = re.compile(r"@L=(\d+)")
_SC_VERSION_PREFIX = re.compile(r"^\d+_")
_GZIP_MAGIC = b"\x1f\x8b"
_NUMERIC_ID_KEYS = ("extId", "eva", "evaNumber")


class ReconStrategy(Protocol):
    """One way of recovering the station tokens of a booking."""

    name: str

    async def attempt(self, context: ReconContext) -> ReconResult:
        """Try to recover both station tokens."""
        ...


class StructuredReconStrategy:
    """Reconstruct the itinerary through the booking service's recon endpoint.

    The origin is the first stop of the first leg of the first connection,
    the destination the last stop of its last leg.
    """

    name = "structured"

    def __init__(self, booking_client: BookingClient) -> None:
        self._booking_client = booking_client

    async def attempt(self, context: ReconContext) -> ReconResult:
        response = await self._booking_client.fetch_recon_connections(
            context.vbid, context.payload, context.cookies
        )
        return self._station_ids_from_response(response)

    def _station_ids_from_response(self, response: ReconResponse) -> ReconResult:
        if not response.verbindungen:
            return ReconFailure(self.name, "recon response has no connections")

        sections = response.verbindungen[0].verbindungs_abschnitte
        if not sections or not sections[0].halte or not sections[-1].halte:
            return ReconFailure(self.name, "first connection has no stops")

        depart_id = sections[0].halte[0].id
        arrival_id = sections[-1].halte[-1].id
        if not depart_id or not arrival_id:
            return ReconFailure(self.name, "stop without id")

        return ReconSuccess(self.name, StationIds(depart_id=depart_id, arrival_id=arrival_id))


class HkiReconStrategy:
    """Take the first two ``@L=`` markers with at least 7 digits."""

    name = "hki"

    async def attempt(self, context: ReconContext) -> ReconResult:
        return self.parse(context.payload.hinfahrt_recon)

    def parse(self, recon: str) -> ReconResult:
        ids = _HKI_LOCATION_ID_PATTERN.findall(recon)
        if len(ids) < 2:
            return ReconFailure(self.name, f"found {len(ids)} location id(s), need 2")
        return ReconSuccess(self.name, StationIds(depart_id=ids[0], arrival_id=ids[1]))


def extract_section(recon: str, section: str) -> str | None:
    """Return the body following a ``¶<section>¶`` marker, or None."""
    parts = recon.split(SECTION_DELIMITER)
    for index, part in enumerate(parts[:-1]):
        if part == section:
            return parts[index + 1]
    return None


def decode_sc_payload(raw: str) -> Any:
    """Decode an SC body into JSON.

    Accepts plain JSON or a version-prefixed (``1_``) base64 blob, optionally
    gzip-compressed.

    Raises:
        ValueError: If the body is in none of these layouts.
    """
    body = _SC_VERSION_PREFIX.sub("", raw.strip(), count=1)
    if body.startswith(("{", "[")):
        return json.loads(body)

    try:
        padded = body + "=" * (-len(body) % 4)
        decoded = base64.b64decode(padded.replace("-", "+").replace("_", "/"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64: {e}") from e

    if decoded.startswith(_GZIP_MAGIC):
        try:
            decoded = gzip.decompress(decoded)
        except (OSError, EOFError) as e:
            raise ValueError(f"invalid gzip stream: {e}") from e

    return json.loads(decoded.decode("utf-8"))


def iter_location_ids(node: Any) -> Iterator[str]:
    """Yield station ids found in a JSON tree, in document order."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key in _NUMERIC_ID_KEYS and isinstance(value, (str, int)):
                candidate = str(value)
                if candidate.isdigit():
                    yield candidate
                    continue
            yield from iter_location_ids(value)
    elif isinstance(node, list):
        for item in node:
            yield from iter_location_ids(item)
    elif isinstance(node, str):
        yield from _LOCATION_ID_PATTERN.findall(node)


class ScJsonReconStrategy:
    """Read the first and last station id from the JSON blob of the SC section."""

    name = "sc_json"

    async def attempt(self, context: ReconContext) -> ReconResult:
        return self.parse(context.payload.hinfahrt_recon)

    def parse(self, recon: str) -> ReconResult:
        section = extract_section(recon, SC_SECTION)
        if not section:
            return ReconFailure(self.name, "no SC section")

        try:
            document = decode_sc_payload(section)
        except (ValueError, UnicodeDecodeError) as e:
            return ReconFailure(self.name, f"unsupported SC format: {e}")

        ids = list(iter_location_ids(document))
        if len(ids) < 2:
            return ReconFailure(self.name, f"SC section holds {len(ids)} location id(s), need 2")
        return ReconSuccess(self.name, StationIds(depart_id=ids[0], arrival_id=ids[-1]))
