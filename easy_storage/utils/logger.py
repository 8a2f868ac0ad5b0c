#!/usr/bin/env python3
"""
Logging utilities for easy_storage
"""

import logging
import os
import sys
from pathlib import Path

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    name: str = 'easy_storage',
    level: int = logging.INFO,
    log_file: str | os.PathLike[str] | None = None,
) -> logging.Logger:
    """Setup logger with a console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(Path(log_file), encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = 'easy_storage') -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
