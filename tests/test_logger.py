"""Tests for logging setup."""

import logging

from vcard_builder.logger import LOGGER_NAME, setup_logger


def test_setup_logger_writes_debug_to_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logger("WARNING", log_file=log_file, console_output=False)
    logging.getLogger(LOGGER_NAME).debug("debug detail")
    for handler in logger.handlers:
        handler.flush()
    assert "debug detail" in log_file.read_text(encoding="utf-8")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_setup_logger_replaces_handlers():
    setup_logger("INFO")
    logger = setup_logger("DEBUG")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
