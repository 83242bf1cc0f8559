"""Tests for logging setup."""

import logging
import logging.handlers

from folder_mirror.logging_setup import get_logger, setup_logging


class TestLoggingSetup:
    """Logging setup tests."""

    def test_console_only(self):
        """Test that without a log file only the console handler is added."""
        logger = setup_logging(log_level="INFO")

        assert logger is get_logger()
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_daily_file_handler(self, tmp_path):
        """Test that a log file gets a midnight rotating handler."""
        log_file = tmp_path / "logs" / "nested" / "mirror.log"
        logger = setup_logging(str(log_file))

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.TimedRotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].when == "MIDNIGHT"
        assert log_file.parent.is_dir()

    def test_messages_reach_file(self, tmp_path):
        """Test that log records are written to the file."""
        log_file = tmp_path / "mirror.log"
        logger = setup_logging(str(log_file), log_level="DEBUG")

        logger.info("ADDED: File x.txt added to target dir")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "INFO" in content
        assert "ADDED: File x.txt" in content

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        """Test that calling setup twice replaces handlers."""
        setup_logging(str(tmp_path / "mirror.log"))
        logger = setup_logging(str(tmp_path / "mirror.log"))

        assert len(logger.handlers) == 2
