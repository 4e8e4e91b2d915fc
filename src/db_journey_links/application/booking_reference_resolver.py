"""Turn a booking reference URL (``?vbid=...``) into an equivalent deep link."""

from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from db_journey_links.application.recon_resolver import ReconResolver
from db_journey_links.domain.errors import MissingParameterError
from db_journey_links.domain.models import ReconContext
from db_journey_links.domain.ports import BookingClient, EventLogger

DEEP_LINK_SCHEME = "https"
DEEP_LINK_HOST = "www.bahn.de"
DEEP_LINK_PATH = "/buchung/fahrplan/suche"


def extract_vbid(url: str) -> str | None:
    """Return the ``vbid`` query parameter of ``url``, if present and non-empty."""
    try:
        values = parse_qs(urlsplit(url).query).get("vbid")
    except ValueError:
        return None
    if not values or not values[0]:
        return None
    return values[0]


def is_booking_reference(url: str) -> bool:
    """True if ``url`` carries a ``vbid`` that needs resolving."""
    return extract_vbid(url) is not None


def build_deep_link(fragment: dict[str, str]) -> str:
    """Build a search deep link with ``fragment`` as its hash parameters."""
    return urlunsplit(
        (DEEP_LINK_SCHEME, DEEP_LINK_HOST, DEEP_LINK_PATH, "", urlencode(fragment))
    )


class BookingReferenceResolver:
    """Resolves booking references through the booking service."""

    def __init__(
        self,
        booking_client: BookingClient,
        recon_resolver: ReconResolver,
        event_logger: EventLogger,
    ) -> None:
        self._booking_client = booking_client
        self._recon_resolver = recon_resolver
        self._event_logger = event_logger

    async def resolve(self, url: str) -> str:
        """Return a deep link carrying ``soid``, ``zoid`` and, if known, ``hd``.

        ``ht`` and ``kl`` have no counterpart in the booking payload and are
        never set here.

        Raises:
            MissingParameterError: If ``url`` has no ``vbid``.
            UpstreamFetchError: If the booking lookup fails.
            ReconResolutionError: If no recon strategy recovers the stations.
        """
        vbid = extract_vbid(url)
        if vbid is None:
            raise MissingParameterError("vbid", "No vbid parameter found in URL")

        lookup = await self._booking_client.fetch_connection(vbid)
        station_ids = await self._recon_resolver.resolve(
            ReconContext(vbid=vbid, payload=lookup.payload, cookies=lookup.cookies)
        )

        fragment = {"soid": station_ids.depart_id, "zoid": station_ids.arrival_id}
        if lookup.payload.hinfahrt_datum:
            fragment["hd"] = lookup.payload.hinfahrt_datum

        resolved = build_deep_link(fragment)
        self._event_logger.info("booking_reference_resolved", vbid=vbid, url=resolved)
        return resolved
