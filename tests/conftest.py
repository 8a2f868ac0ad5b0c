"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from easy_storage import Storeable


class User(Storeable):
    name: str
    email: str


@pytest.fixture
def user_model() -> type[User]:
    """Return the two-field model used across the storage tests."""
    return User


@pytest.fixture
def user() -> User:
    return User(name="Alice", email="alice@alice.com")


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Return an empty directory for files written by a test."""
    target = tmp_path / "store"
    target.mkdir()
    return target


@pytest.fixture(autouse=True)
def reset_storage_logger():
    """Remove handlers added by setup_logger() so tests do not leak output."""
    logger = logging.getLogger("easy_storage")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
