"""Journey assembler port used by inbound adapters."""

from typing import Protocol

from db_journey_links.domain.models.journey_details import ExtractionFailure, JourneyDetails


class JourneyAssembler(Protocol):
    """Turns a deep link or booking reference URL into journey details."""

    async def assemble(self, url: str) -> JourneyDetails | ExtractionFailure:
        """Return journey details or the extraction failure."""
        ...
