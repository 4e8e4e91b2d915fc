"""Tests for domain models and errors."""

import pytest
from pydantic import ValidationError

from db_journey_links.domain.errors import (
    JourneyLinkError,
    MissingParameterError,
    UpstreamFetchError,
)
from db_journey_links.domain.models import BookingPayload, ExtractionFailure, JourneyDetails


def test_journey_details_is_immutable() -> None:
    """Given journey details, when assigning a field, then a ValidationError is raised."""
    details = JourneyDetails(from_station_id="8000001")

    with pytest.raises(ValidationError):
        details.from_station_id = "8000002"  # type: ignore[misc]


def test_journey_details_accepts_wire_aliases() -> None:
    """Given camelCase keys, when validating, then fields are populated."""
    details = JourneyDetails.model_validate(
        {"fromStationId": "8000001", "toStationId": "8000261", "class": 2}
    )

    assert details.is_complete
    assert details.fare_class == 2


def test_extraction_failure_omits_missing_details() -> None:
    """Given a failure without details, when serializing, then only error is present."""
    assert ExtractionFailure(error="boom").to_dict() == {"error": "boom"}


def test_booking_payload_ignores_unknown_fields() -> None:
    """Given extra booking fields, when validating, then they are ignored."""
    payload = BookingPayload.model_validate({"hinfahrtRecon": "¶HKI¶", "angebote": []})

    assert payload.hinfahrt_recon == "¶HKI¶"
    assert payload.hinfahrt_datum is None


def test_errors_carry_status_codes_and_causes() -> None:
    """Given domain errors, when inspecting, then status codes and causes are exposed."""
    cause = TimeoutError("slow")
    error = UpstreamFetchError("Booking service timed out", cause=cause)

    assert isinstance(error, JourneyLinkError)
    assert error.status_code == 502
    assert str(error) == "Booking service timed out: slow"
    assert MissingParameterError("url").status_code == 400
    assert str(MissingParameterError("url")) == "Missing required parameter: url"
