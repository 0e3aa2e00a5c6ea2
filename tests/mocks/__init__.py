"""Mock implementations for testing."""

from tests.mocks.hosts import RecordingScrollHost, ScrollCommand

__all__ = ["RecordingScrollHost", "ScrollCommand"]
