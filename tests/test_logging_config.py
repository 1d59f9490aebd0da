"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from concentration_insight.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_warning(self, restore_logger):
        logger = setup_logging()
        assert logger.name == "concentration_insight"
        assert logger.level == logging.WARNING

    def test_verbose_is_debug(self, restore_logger):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_wins(self, restore_logger):
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_rich_handler_installed(self, restore_logger):
        logger = setup_logging()
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_repeated_setup_does_not_stack_handlers(self, restore_logger):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, restore_logger, tmp_path):
        log_file = tmp_path / "metrics.log"
        logger = setup_logging(verbose=True, log_file=str(log_file))
        get_logger("api").debug("hello from api")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "hello from api" in content
        assert "concentration_insight.api" in content


class TestGetLogger:
    """Tests for get_logger."""

    def test_root(self):
        assert get_logger().name == "concentration_insight"

    def test_prefixes_short_names(self):
        assert get_logger("math").name == "concentration_insight.math"

    def test_keeps_qualified_names(self):
        name = "concentration_insight.math.gini"
        assert get_logger(name).name == name
