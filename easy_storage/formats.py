#!/usr/bin/env python3
"""
Storage Formats

The closed set of serialization formats supported by easy_storage and the
mapping from file name extensions to those formats.

Licensed under the GNU General Public License v3.0 (GPLv3)

Recognized extensions (public contract, matched case-insensitively):
    json -> Format.JSON
    toml -> Format.TOML

Example:
    >>> from easy_storage.formats import format_for_path
    >>> format_for_path("settings/user.TOML")
    <Format.TOML: 'toml'>
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import PurePath

from .errors import UnsupportedExtensionError


class Format(Enum):
    """Serialization formats understood by the storage layer"""

    JSON = "json"  # Structured markup
    TOML = "toml"  # Configuration style

    @property
    def extension(self) -> str:
        """Canonical extension token for this format (no leading dot)."""
        return self.value

    @classmethod
    def from_extension(cls, extension: str | None) -> Format:
        """Alias of :func:`resolve`."""
        return resolve(extension)


SUPPORTED_EXTENSIONS: dict[str, Format] = {fmt.extension: fmt for fmt in Format}


def resolve(extension: str | None) -> Format:
    """
    Map an extension token to a Format.

    Args:
        extension: Extension such as ``"json"``, ``".toml"`` or ``"JSON"``.
            ``None`` means the path had no extension.

    Returns:
        The matching Format

    Raises:
        UnsupportedExtensionError: If the token is absent or not recognized
    """
    if extension is None:
        raise UnsupportedExtensionError(None)

    token = extension[1:] if extension.startswith(".") else extension
    fmt = SUPPORTED_EXTENSIONS.get(token.lower())
    if fmt is None:
        raise UnsupportedExtensionError(extension)
    return fmt


def extension_of(path: str | os.PathLike[str]) -> str | None:
    """
    Return the final extension of ``path`` without the leading dot.

    Dot-files such as ``.json`` have no extension, and ``a.tar.json`` has
    the extension ``json``.
    """
    suffix = PurePath(os.fspath(path)).suffix
    return suffix[1:] if suffix else None


def format_for_path(path: str | os.PathLike[str]) -> Format:
    """Infer the Format from the extension of ``path``."""
    try:
        return resolve(extension_of(path))
    except UnsupportedExtensionError as e:
        raise UnsupportedExtensionError(e.extension, path=path) from None
