"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from require_options.logging_config import get_logger, setup_logging, verbosity_from_flags


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the package logger back to its default level afterwards."""
    yield
    logging.getLogger("require_options").setLevel(logging.NOTSET)


class TestSetupLogging:
    """Handler installation per verbosity."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        """Each verbosity maps to one level."""
        logger = setup_logging(verbosity)
        assert logger.name == "require_options"
        assert logger.level == level
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_log_file(self, tmp_path):
        """Records are also appended to the log file."""
        log_file = tmp_path / "run.log"
        logger = setup_logging("normal", str(log_file))
        logger.warning("pending fixes")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "WARNING - pending fixes" in log_file.read_text()

    def test_reconfigure_replaces_handlers(self):
        """A second call replaces rather than adds handlers."""
        setup_logging("verbose")
        setup_logging("quiet")
        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logging.getLogger("require_options").level == logging.ERROR


class TestHelpers:
    """Flag mapping and logger naming."""

    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [
            (False, False, "normal"),
            (True, False, "verbose"),
            (False, True, "quiet"),
            (True, True, "quiet"),
        ],
    )
    def test_verbosity_from_flags(self, verbose, quiet, expected):
        """Quiet wins over verbose."""
        assert verbosity_from_flags(verbose, quiet) == expected

    def test_get_logger_namespace(self):
        """Names are nested under the package logger."""
        assert get_logger().name == "require_options"
        assert get_logger("require_options.linter").name == "require_options.linter"
        assert get_logger("plugins").name == "require_options.plugins"
