"""Tests for the journey detail assembler and summary formatting."""

import math

import pytest

from db_journey_links.application.booking_reference_resolver import BookingReferenceResolver
from db_journey_links.application.journey_detail_assembler import (
    JourneyDetailAssembler,
    format_journey_summary,
)
from db_journey_links.application.recon_resolver import ReconResolver
from db_journey_links.domain.errors import IncompleteJourneyError
from db_journey_links.domain.models import ExtractionFailure, JourneyDetails
from tests.fakes import (
    AACHEN_LID,
    MUENCHEN_LID,
    FakeBookingClient,
    RecordingEventLogger,
    make_payload,
    make_recon_response,
)

BOOKING_URL = "https://www.bahn.de/buchung/start?vbid=abc123"


def _assembler(
    client: FakeBookingClient, event_logger: RecordingEventLogger
) -> JourneyDetailAssembler:
    recon_resolver = ReconResolver.with_default_strategies(client, event_logger)
    return JourneyDetailAssembler(
        BookingReferenceResolver(client, recon_resolver, event_logger), event_logger
    )


class TestJourneyDetailAssembler:
    """Tests for JourneyDetailAssembler.assemble."""

    @pytest.mark.asyncio
    async def test_when_url_is_deep_link_then_extracts_without_network(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given a deep link, when assembling, then the booking service is not called."""
        client = FakeBookingClient()
        url = (
            "https://www.bahn.de/buchung/fahrplan/suche"
            "#soid=8000001&zoid=8000261&hd=2024-05-01&ht=10:30&kl=2"
        )

        details = await _assembler(client, event_logger).assemble(url)

        assert isinstance(details, JourneyDetails)
        assert (details.from_station_id, details.to_station_id) == ("8000001", "8000261")
        assert details.time == "10:30"
        assert client.lookups == []
        assert event_logger.names("info") == ["journey_details"]

    @pytest.mark.asyncio
    async def test_when_url_is_booking_reference_then_resolves_first(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given a vbid URL, when assembling, then the resolved stations and date are extracted."""
        client = FakeBookingClient(
            payload=make_payload(date="2024-05-01T09:15:00"),
            recon_response=make_recon_response([AACHEN_LID], [MUENCHEN_LID]),
        )

        details = await _assembler(client, event_logger).assemble(BOOKING_URL)

        assert details == JourneyDetails(
            from_station="Aachen Hbf",
            from_station_id="8000001",
            to_station="München Hbf",
            to_station_id="8000261",
            date="2024-05-01",
            time="09:15",
        )

    @pytest.mark.asyncio
    async def test_resolving_is_idempotent_on_the_produced_deep_link(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given a booking URL, when re-assembling from its deep link, then the details are equal."""
        client = FakeBookingClient(
            recon_response=make_recon_response([AACHEN_LID], [MUENCHEN_LID])
        )
        assembler = _assembler(client, event_logger)

        deep_link = await assembler.resolve_url(BOOKING_URL)
        from_booking = await assembler.assemble(BOOKING_URL)
        from_deep_link = await assembler.assemble(deep_link)

        assert from_booking == from_deep_link
        assert await assembler.resolve_url(deep_link) == deep_link

    @pytest.mark.asyncio
    async def test_when_station_id_missing_then_raises_incomplete(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given a deep link without zoid, when assembling, then IncompleteJourneyError is raised."""
        url = "https://www.bahn.de/buchung/fahrplan/suche#soid=8000001"

        with pytest.raises(IncompleteJourneyError, match="missing fromStationId or toStationId"):
            await _assembler(FakeBookingClient(), event_logger).assemble(url)

        assert event_logger.names("error") == ["journey_incomplete"]

    @pytest.mark.asyncio
    async def test_when_station_tokens_are_names_only_then_raises_incomplete(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given name-only tokens, when assembling, then the record is rejected as incomplete."""
        url = "https://www.bahn.de/buchung/fahrplan/suche#soid=Berlin+Hbf&zoid=Hamburg+Hbf"

        with pytest.raises(IncompleteJourneyError):
            await _assembler(FakeBookingClient(), event_logger).assemble(url)

    @pytest.mark.asyncio
    async def test_when_extraction_fails_then_failure_is_returned_as_is(
        self, event_logger: RecordingEventLogger
    ) -> None:
        """Given a malformed URL, when assembling, then the extraction failure is returned."""
        result = await _assembler(FakeBookingClient(), event_logger).assemble("not a url")

        assert isinstance(result, ExtractionFailure)
        assert result.error == "Failed to extract journey details"


class TestFormatJourneySummary:
    """Tests for the one-line summary."""

    def test_when_all_fields_known_then_renders_them_in_order(self) -> None:
        """Given complete details, when formatting, then every field appears in fixed order."""
        details = JourneyDetails(
            from_station="Aachen Hbf",
            from_station_id="8000001",
            to_station="München Hbf",
            to_station_id="8000261",
            date="2024-05-01",
            time="09:15",
            fare_class=1,
        )

        assert format_journey_summary(details) == (
            "From: Aachen Hbf (8000001) | To: München Hbf (8000261) | "
            "Date: 2024-05-01 | Time: 09:15 | Class: First"
        )

    def test_when_fields_missing_then_uses_placeholders(self) -> None:
        """Given an empty record, when formatting, then Unknown and N/A placeholders are used."""
        assert format_journey_summary(JourneyDetails()) == (
            "From: Unknown (N/A) | To: Unknown (N/A) | Date: N/A | Time: N/A | Class: Second"
        )

    @pytest.mark.parametrize("fare_class", [2, 3, None, math.nan])
    def test_when_class_is_not_one_then_renders_second(self, fare_class: float | None) -> None:
        """Given any class other than 1, when formatting, then Second is shown."""
        summary = format_journey_summary(JourneyDetails(fare_class=fare_class))

        assert summary.endswith("Class: Second")
