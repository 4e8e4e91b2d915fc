"""Journey detail result variants."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class JourneyDetails(BaseModel):
    """Normalized journey query recovered from a deep link.

    ``fare_class`` is the raw decimal value of the ``kl`` token. It is NaN
    when ``kl`` is present but not numeric and is not constrained to 1 or 2.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_station: str | None = Field(default=None, alias="fromStation")
    from_station_id: str | None = Field(default=None, alias="fromStationId")
    to_station: str | None = Field(default=None, alias="toStation")
    to_station_id: str | None = Field(default=None, alias="toStationId")
    date: str | None = None
    time: str | None = None
    fare_class: int | float | None = Field(default=None, alias="class")

    @field_serializer("fare_class")
    def _serialize_fare_class(self, value: int | float | None) -> int | float | None:
        if isinstance(value, float) and math.isnan(value):
            return None
        return value

    @property
    def is_complete(self) -> bool:
        """Both station identifiers are known."""
        return bool(self.from_station_id) and bool(self.to_station_id)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with camelCase keys and ``class``."""
        return self.model_dump(by_alias=True)


class ExtractionFailure(BaseModel):
    """Structured failure returned instead of JourneyDetails."""

    model_config = ConfigDict(frozen=True)

    error: str
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, omitting ``details`` when absent."""
        return self.model_dump(exclude_none=True)
