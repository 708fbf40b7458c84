"""Tests for the logging setup."""

import logging

import pytest

from boundarylayer.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("boundarylayer")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_repeated_setup_does_not_stack_handlers(self, package_logger):
        setup_logging()
        setup_logging()

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO

    def test_file_handler_receives_records(self, package_logger, tmp_path):
        log_file = tmp_path / "viewer.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logging.getLogger("boundarylayer.model.extraction").debug("station skipped")

        for handler in package_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "boundarylayer.model.extraction - DEBUG - station skipped" in text
        assert len(package_logger.handlers) == 2
