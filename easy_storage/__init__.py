#!/usr/bin/env python3
"""
easy_storage - Save and load structured values as JSON or TOML files

Any value pydantic can validate can be written to a file and read back,
with the format given explicitly or inferred from the file extension.

License: GPL-3.0

Usage:
    from easy_storage import Storeable

    class User(Storeable):
        name: str
        email: str

    User(name="Alice", email="alice@alice.com").save_by_extension("user.toml", overwrite=True)
    user = User.load_by_extension("user.toml")
"""

import logging

from .__version__ import __author__, __author_email__, __license__, __url__, __version__
from .config_schemas import DEFAULT_CONFIG, ConfigBuilder, StorageConfig
from .errors import (
    AlreadyExistsError,
    ErrorCategory,
    FormatError,
    JsonFormatError,
    Stage,
    StorageError,
    StorageIOError,
    TomlFormatError,
    UnsupportedExtensionError,
)
from .formats import SUPPORTED_EXTENSIONS, Format, extension_of, format_for_path, resolve
from .persistence import dumps, load, load_by_extension, loads, save, save_by_extension
from .storeable import Storeable

__description__ = "Save and load structured values as JSON or TOML files"

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
    # Capability
    "Storeable",
    # Operations
    "save",
    "load",
    "save_by_extension",
    "load_by_extension",
    "dumps",
    "loads",
    # Formats
    "Format",
    "SUPPORTED_EXTENSIONS",
    "resolve",
    "extension_of",
    "format_for_path",
    # Errors
    "StorageError",
    "StorageIOError",
    "AlreadyExistsError",
    "FormatError",
    "JsonFormatError",
    "TomlFormatError",
    "UnsupportedExtensionError",
    "ErrorCategory",
    "Stage",
    # Configuration
    "StorageConfig",
    "ConfigBuilder",
    "DEFAULT_CONFIG",
]
