"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import patch

import structlog
from structlog.testing import capture_logs

from infinite_carousel.adapters.manual_scheduler import ManualScheduler
from infinite_carousel.core.controller import InfiniteCarouselController
from infinite_carousel.core.logging import configure_logging, get_logger
from tests.mocks.hosts import RecordingScrollHost


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Should configure pretty-printed output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        logger.info("test message", key="value")

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        logger.info("test message", key="value")

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Should default to INFO for unrecognised level names."""
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_quiets_asyncio_logger(self) -> None:
        """Should set the asyncio logger to WARNING level."""
        configure_logging(development=True, log_level="DEBUG")
        assert logging.getLogger("asyncio").level == logging.WARNING


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_json_output_includes_bound_context(self) -> None:
        """Should merge context bound by the host into JSON lines."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            structlog.contextvars.bind_contextvars(screen="home")
            get_logger("test").info("carousel_activated", item_count=5)
            handler.flush()

            lines = [line for line in output.getvalue().splitlines() if line]
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "carousel_activated"
            assert parsed["item_count"] == 5
            assert parsed["screen"] == "home"
        finally:
            root_logger.removeHandler(handler)
            structlog.contextvars.clear_contextvars()

    def test_unbind_removes_context(self) -> None:
        """Should drop unbound keys from later log lines."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            structlog.contextvars.bind_contextvars(keep="this", remove="that")
            structlog.contextvars.unbind_contextvars("remove")
            get_logger("test").info("after_unbind")
            handler.flush()

            parsed = json.loads(output.getvalue().splitlines()[-1])
            assert parsed["keep"] == "this"
            assert "remove" not in parsed
        finally:
            root_logger.removeHandler(handler)
            structlog.contextvars.clear_contextvars()


class TestControllerLogEvents:
    """The controller reports lifecycle and drag transitions."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_lifecycle_and_drag_events(self) -> None:
        scheduler = ManualScheduler()
        with capture_logs() as logs:
            controller = InfiniteCarouselController(
                ["a", "b", "c"], RecordingScrollHost(), scheduler, name="home_updates"
            )
            controller.activate()
            controller.on_drag_begin()
            controller.on_drag_end()
            scheduler.advance(5)
            controller.on_scroll(10)
            controller.dispose()

        controller_logs = [
            entry for entry in logs if entry["event"] != "manual_scheduler_advanced"
        ]
        events = [entry["event"] for entry in controller_logs]
        assert events[0] == "carousel_activated"
        assert "autoplay_suspended" in events
        assert "autoplay_resumed" in events
        assert "boundary_corrected" in events
        transitions = [
            entry["transition"]
            for entry in controller_logs
            if entry["event"] == "drag_transition"
        ]
        assert transitions == ["drag_begin", "drag_end", "resume", "reset"]
        assert events[-1] == "carousel_disposed"
        assert all(entry["carousel"] == "home_updates" for entry in controller_logs)
