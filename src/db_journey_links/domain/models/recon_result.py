"""Results of the recon strategies."""

from dataclasses import dataclass, field

from db_journey_links.domain.models.booking_payload import BookingPayload


@dataclass(frozen=True)
class StationIds:
    """Origin and destination tokens recovered from a booking."""

    depart_id: str
    arrival_id: str


@dataclass(frozen=True)
class ReconContext:
    """Everything a recon strategy may look at."""

    vbid: str
    payload: BookingPayload
    cookies: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ReconSuccess:
    """A strategy recovered both station tokens."""

    strategy: str
    station_ids: StationIds


@dataclass(frozen=True)
class ReconFailure:
    """A strategy could not recover both station tokens."""

    strategy: str
    reason: str


ReconResult = ReconSuccess | ReconFailure
