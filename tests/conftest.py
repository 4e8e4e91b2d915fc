"""Shared fixtures for journey link tests."""

import pytest

from tests.fakes import RecordingEventLogger


@pytest.fixture
def event_logger() -> RecordingEventLogger:
    """Event logger that records events for assertions."""
    return RecordingEventLogger()
