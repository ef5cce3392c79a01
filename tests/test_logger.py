# tests/test_logger.py

"""
Tests for the shared logger factory.
"""

from common.logger import (
    LoggerFactory,
    LoggerType,
    LogLevel,
    PrintLogger,
    StandardLogger,
)


class TestLoggerFactory:
    """Test cases for LoggerFactory."""

    def test_get_logger_is_cached_by_name(self):
        first = LoggerFactory.get_logger(name="test-cached", level=LogLevel.DEBUG)
        second = LoggerFactory.get_logger(name="test-cached")

        assert first is second
        assert isinstance(first, StandardLogger)

    def test_print_logger_respects_level(self, capsys):
        logger = LoggerFactory.create_logger(
            name="test-print", logger_type=LoggerType.PRINT, level=LogLevel.WARNING
        )

        logger.info("hidden")
        logger.warning("shown %s", "here")

        assert isinstance(logger, PrintLogger)
        output = capsys.readouterr().out
        assert "hidden" not in output
        assert "shown here" in output

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "service.log"
        logger = LoggerFactory.create_logger(
            name="test-file", level=LogLevel.INFO, use_colors=False, log_file=str(log_file)
        )

        logger.info("written to disk")

        assert "written to disk" in log_file.read_text(encoding="utf-8")
