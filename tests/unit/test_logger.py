#!/usr/bin/env python3
"""Tests for logging helpers."""

import logging

from easy_storage.utils.logger import get_logger, setup_logger


def test_package_logger_is_silent_by_default():
    import easy_storage  # noqa: F401

    handlers = logging.getLogger("easy_storage").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_setup_logger_adds_console_handler_once():
    logger = setup_logger(level=logging.DEBUG)
    assert logger.name == "easy_storage"
    assert logger.level == logging.DEBUG
    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1

    setup_logger(level=logging.DEBUG)
    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1


def test_setup_logger_with_file(tmp_path):
    log_file = tmp_path / "storage.log"
    logger = setup_logger("easy_storage", level=logging.DEBUG, log_file=log_file)
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text()


def test_get_logger():
    assert get_logger() is logging.getLogger("easy_storage")
    assert get_logger("easy_storage.persistence").parent is logging.getLogger("easy_storage")
