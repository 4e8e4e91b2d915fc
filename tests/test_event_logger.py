"""Tests for the stdlib-backed event logger."""

import logging

import pytest

from db_journey_links.adapters.event_logging import LoggingEventLogger, NullEventLogger


def test_info_event_renders_fields_and_passes_extra(caplog: pytest.LogCaptureFixture) -> None:
    """Given fields, when logging info, then they are rendered and attached as extra."""
    event_logger = LoggingEventLogger(logging.getLogger("test.events"))

    with caplog.at_level(logging.INFO, logger="test.events"):
        event_logger.info("recon_resolved", strategy="hki", depart_id="8000001", note=None)

    record = caplog.records[0]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "recon_resolved strategy=hki depart_id=8000001"
    assert record.event == "recon_resolved"
    assert record.event_fields == {"strategy": "hki", "depart_id": "8000001", "note": None}


def test_error_event_without_fields_logs_event_name(caplog: pytest.LogCaptureFixture) -> None:
    """Given no fields, when logging an error, then only the event name is logged."""
    event_logger = LoggingEventLogger(logging.getLogger("test.events"))

    with caplog.at_level(logging.INFO, logger="test.events"):
        event_logger.error("recon_exhausted")

    assert caplog.records[0].levelno == logging.ERROR
    assert caplog.records[0].getMessage() == "recon_exhausted"


def test_null_event_logger_discards_events(caplog: pytest.LogCaptureFixture) -> None:
    """Given the null logger, when logging, then nothing is recorded."""
    with caplog.at_level(logging.DEBUG):
        NullEventLogger().info("x", a=1)
        NullEventLogger().error("y")

    assert caplog.records == []
