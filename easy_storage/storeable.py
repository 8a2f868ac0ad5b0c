#!/usr/bin/env python3
"""
Storeable Models

Subclass Storeable instead of pydantic.BaseModel to give a model save and
load operations. Storeable adds no fields and keeps no state.

Licensed under the GNU General Public License v3.0 (GPLv3)

Example:
    >>> from easy_storage import Format, Storeable
    >>>
    >>> class User(Storeable):
    ...     name: str
    ...     email: str
    >>>
    >>> user = User(name="Alice", email="alice@alice.com")
    >>> user.save_by_extension("user.json", overwrite=True)
    >>> User.load_by_extension("user.json") == user
    True
    >>> User.load("user.json", Format.JSON) == user
    True
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel

from . import persistence
from .config_schemas import StorageConfig
from .formats import Format
from .persistence import PathLike


class Storeable(BaseModel):
    """Pydantic model that can persist itself to a JSON or TOML file."""

    def save(
        self,
        path: PathLike,
        overwrite: bool = False,
        format: Format = Format.JSON,
        *,
        config: StorageConfig | None = None,
    ) -> None:
        """
        Save this model to ``path`` in ``format``.

        Raises:
            AlreadyExistsError: If ``path`` exists and ``overwrite`` is False
            JsonFormatError, TomlFormatError: If encoding fails
            StorageIOError: If the write fails
        """
        persistence.save(self, path, overwrite, format, config=config, value_type=type(self))

    def save_by_extension(
        self,
        path: PathLike,
        overwrite: bool = False,
        *,
        config: StorageConfig | None = None,
    ) -> None:
        """
        Save this model to ``path``, choosing the format from the extension
        (``.json`` or ``.toml``, any case).

        Raises:
            UnsupportedExtensionError: If the extension is missing or not recognized
        """
        persistence.save_by_extension(self, path, overwrite, config=config, value_type=type(self))

    def dumps(self, format: Format = Format.JSON, *, config: StorageConfig | None = None) -> str:
        """Encode this model as document text."""
        return persistence.dumps(self, format, config=config, value_type=type(self))

    @classmethod
    def load(
        cls,
        path: PathLike,
        format: Format = Format.JSON,
        *,
        config: StorageConfig | None = None,
    ) -> Self:
        """
        Load an instance from ``path`` in ``format``.

        Raises:
            StorageIOError: If the file cannot be read
            JsonFormatError, TomlFormatError: If the content is malformed or
                does not match the model
        """
        return persistence.load(cls, path, format, config=config)

    @classmethod
    def load_by_extension(cls, path: PathLike, *, config: StorageConfig | None = None) -> Self:
        """Load an instance from ``path``, choosing the format from the extension."""
        return persistence.load_by_extension(cls, path, config=config)

    @classmethod
    def loads(
        cls,
        text: str,
        format: Format = Format.JSON,
        *,
        config: StorageConfig | None = None,
    ) -> Self:
        """Decode an instance from document text."""
        return persistence.loads(cls, text, format, config=config)
