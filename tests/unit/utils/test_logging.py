"""Tests for logging utility."""

import logging
from io import StringIO


class TestLoggerConfiguration:
    """Test that logger configures correctly from settings."""

    def test_configure_logging_creates_logger(self):
        """configure_logging should return a configured logger."""
        from src.utils.logging import configure_logging

        logger = configure_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "resume_engine"

    def test_configure_logging_respects_level(self):
        """Logger should respect the configured log level."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="DEBUG")
        assert logger.level == logging.DEBUG

        logger = configure_logging(level="WARNING")
        assert logger.level == logging.WARNING

    def test_configure_logging_default_level_is_info(self):
        """Default log level should be INFO."""
        from src.utils.logging import configure_logging

        logger = configure_logging()
        assert logger.level == logging.INFO

    def test_configure_logging_adds_single_handler(self):
        """Repeated configuration should not stack handlers."""
        from src.utils.logging import configure_logging

        configure_logging()
        logger = configure_logging(level="DEBUG")
        assert len(logger.handlers) == 1


class TestPackageLoggers:
    """Test that module loggers share the application handler."""

    def test_module_logger_level_follows_configuration(self):
        """Module loggers under src should use the configured level."""
        from src.utils.logging import configure_logging

        configure_logging(level="DEBUG")
        module_logger = logging.getLogger("src.rendering.service")
        assert module_logger.getEffectiveLevel() == logging.DEBUG

    def test_module_logger_output(self):
        """Messages from module loggers should reach the console handler."""
        from src.utils.logging import configure_logging

        app_logger = configure_logging(level="INFO")
        buffer = StringIO()
        app_logger.handlers[0].setStream(buffer)

        logging.getLogger("src.rendering.service").info("Rendering DOCX")

        assert "Rendering DOCX" in buffer.getvalue()
        assert "src.rendering.service" in buffer.getvalue()

    def test_reset_logging_restores_propagation(self):
        """reset_logging should hand module loggers back to the root logger."""
        from src.utils.logging import configure_logging, reset_logging

        configure_logging()
        reset_logging()

        assert logging.getLogger("src").propagate is True
        assert logging.getLogger("src").handlers == []


class TestLogOutput:
    """Test that log output format is correct."""

    def test_log_message_includes_level(self):
        """Log messages should include the log level."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="INFO")

        buffer = StringIO()
        handler = logging.StreamHandler(buffer)
        handler.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(handler)

        logger.info("Test message")

        output = buffer.getvalue()
        assert "INFO" in output
        assert "Test message" in output

    def test_log_message_includes_timestamp(self):
        """Log messages should include a timestamp."""
        from src.utils.logging import configure_logging

        logger = configure_logging(level="INFO")

        buffer = StringIO()
        handler = logging.StreamHandler(buffer)
        handler.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(handler)

        logger.info("Test message")

        output = buffer.getvalue()
        # Timestamp format includes date separators
        assert "-" in output or ":" in output


class TestGetLogger:
    """Test the get_logger convenience function."""

    def test_get_logger_returns_child_logger(self):
        """get_logger should return a child of the main logger."""
        from src.utils.logging import configure_logging, get_logger

        configure_logging()

        logger = get_logger("my_module")
        assert logger.name == "resume_engine.my_module"

    def test_get_logger_inherits_level(self):
        """Child logger should inherit parent's level."""
        from src.utils.logging import configure_logging, get_logger

        configure_logging(level="DEBUG")

        logger = get_logger("test_module")
        assert logger.getEffectiveLevel() == logging.DEBUG
