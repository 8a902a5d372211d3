"""Tests for logging setup."""
import logging

from resume_generator.logger import get_logger, init_logger, setup_logging


class TestSetupLogging:
    """Handlers and levels on the namespace logger."""

    def test_console_only(self, tmp_path):
        logger = setup_logging(tmp_path / "logs", "WARNING", log_to_file=False)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING
        assert not (tmp_path / "logs").exists()

    def test_file_gets_debug(self, tmp_path):
        logger = setup_logging(tmp_path, "ERROR", log_to_console=False)
        get_logger("storage").debug("saved draft")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

        logs = list(tmp_path.glob("resume_generator_*.log"))
        assert len(logs) == 1
        assert "saved draft" in logs[0].read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(tmp_path, log_to_file=False)
        logger = init_logger(tmp_path, "INFO", log_to_file=False)

        assert len(logger.handlers) == 1


class TestGetLogger:
    def test_child_of_namespace(self):
        assert get_logger("export").name == "resume_generator.export"
        assert get_logger().name == "resume_generator"
