"""Booking service payloads, validated at the HTTP boundary."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookingPayload(BaseModel):
    """Body of ``/web/api/angebote/verbindung/{vbid}``.

    Only the fields the resolver reads are declared; everything else the
    booking service sends is ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    hinfahrt_recon: str = Field(alias="hinfahrtRecon")
    hinfahrt_datum: str | None = Field(default=None, alias="hinfahrtDatum")

    @field_validator("hinfahrt_recon")
    @classmethod
    def validate_recon_not_blank(cls, v: str) -> str:
        """Reject an empty serialized itinerary."""
        if not v.strip():
            raise ValueError("hinfahrtRecon must not be empty")
        return v


class ReconStop(BaseModel):
    """A stop (``halt``) of a recon section."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str | None = None


class ReconSection(BaseModel):
    """A leg (``verbindungsAbschnitt``) of a recon connection."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    halte: list[ReconStop] = Field(default_factory=list)


class ReconConnection(BaseModel):
    """An itinerary (``verbindung``) of the recon response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    verbindungs_abschnitte: list[ReconSection] = Field(
        default_factory=list, alias="verbindungsAbschnitte"
    )


class ReconResponse(BaseModel):
    """Body of ``/web/api/angebote/recon``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    verbindungen: list[ReconConnection] = Field(default_factory=list)


@dataclass(frozen=True)
class BookingLookup:
    """Validated booking payload plus the cookies to forward on follow-up calls."""

    payload: BookingPayload
    cookies: list[str] = field(default_factory=list)
