"""Tests for logging setup"""
import io
import logging

from git_springclean.logging_config import ColoredFormatter, get_logger, setup_logging


class TestSetupLogging:
    """Test logging levels and destinations."""

    def test_default_level_is_warning(self):
        stream = io.StringIO()
        setup_logging(stream=stream)

        get_logger("git_springclean.services.discovery_service").info("hidden")
        get_logger("git_springclean.core.springclean").warning("shown")

        assert stream.getvalue() == "[core.springclean] shown\n"

    def test_verbose_shows_info(self):
        stream = io.StringIO()
        setup_logging(verbose=True, stream=stream)

        get_logger("git_springclean.services.discovery_service").info("Skipping x")

        assert stream.getvalue() == "[discovery_service] Skipping x\n"

    def test_gitpython_quiet_unless_debugging(self):
        setup_logging(verbose=True, stream=io.StringIO())
        assert logging.getLogger("git").level == logging.WARNING

        setup_logging(debug=True, stream=io.StringIO())
        assert logging.getLogger("git").level == logging.DEBUG

    def test_no_color_when_not_a_terminal(self):
        stream = io.StringIO()
        setup_logging(stream=stream)

        get_logger("x").error("plain")

        assert "\033[" not in stream.getvalue()


class TestColoredFormatter:
    """Test level name coloring."""

    def test_record_not_mutated(self):
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", use_color=True)
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        formatted = formatter.format(record)

        assert formatted == "\033[33mWARNING\033[0m careful"
        assert record.levelname == "WARNING"


def test_get_logger_strips_package_prefix():
    assert get_logger("git_springclean.services.git_service").name == "git_service"
    assert get_logger("git_springclean.cli.main").name == "cli.main"
