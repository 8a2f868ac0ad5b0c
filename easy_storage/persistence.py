#!/usr/bin/env python3
"""
Save/Load Operations

One function per operation. Each call resolves a Format, converts the value
to or from document text with that Format's serializer, and performs at
most one whole-file read or write. Nothing is cached between calls.

Values are converted to plain data with pydantic, so any type pydantic can
validate works: BaseModel subclasses, dataclasses and builtin containers.

Licensed under the GNU General Public License v3.0 (GPLv3)

Example:
    >>> from dataclasses import dataclass
    >>> from easy_storage.persistence import load_by_extension, save_by_extension
    >>>
    >>> @dataclass
    ... class User:
    ...     name: str
    ...     email: str
    >>>
    >>> save_by_extension(User("Alice", "alice@alice.com"), "user.toml", overwrite=True)
    >>> load_by_extension(User, "user.toml")
    User(name='Alice', email='alice@alice.com')
"""

from __future__ import annotations

import os
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .adapters.file_system import default_file_system
from .config_schemas import DEFAULT_CONFIG, StorageConfig
from .errors import AlreadyExistsError, Stage, StorageIOError, format_error_for
from .formats import Format, format_for_path
from .interfaces import FileSystemLike
from .serializers import get_serializer
from .utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

PathLike = str | os.PathLike[str]


def dumps(
    value: Any,
    format: Format = Format.JSON,
    *,
    config: StorageConfig | None = None,
    value_type: Any = None,
) -> str:
    """
    Encode ``value`` as document text without touching the filesystem.

    Args:
        value: Value to encode
        format: Target format
        config: Storage configuration (defaults to DEFAULT_CONFIG)
        value_type: Type used to serialize ``value`` (defaults to its runtime type)

    Raises:
        JsonFormatError, TomlFormatError: If encoding fails
    """
    return _to_text(value, format, config or DEFAULT_CONFIG, value_type)


def loads(
    value_type: type[T],
    text: str,
    format: Format = Format.JSON,
    *,
    config: StorageConfig | None = None,
) -> T:
    """
    Decode document text into a ``value_type`` instance.

    Raises:
        JsonFormatError, TomlFormatError: If the text is malformed or does not
            match ``value_type``
    """
    return _from_text(value_type, text, format, config or DEFAULT_CONFIG)


def save(
    value: Any,
    path: PathLike,
    overwrite: bool = False,
    format: Format = Format.JSON,
    *,
    config: StorageConfig | None = None,
    value_type: Any = None,
    file_system: FileSystemLike | None = None,
) -> None:
    """
    Save ``value`` to ``path`` in ``format``.

    The existing-file check happens before encoding, and encoding happens
    before the file is opened, so a refused or failed encode leaves the
    filesystem untouched.

    Args:
        value: Value to persist
        path: Target file path; its parent directory must exist
        overwrite: Replace an existing file at ``path``
        format: Serialization format
        config: Storage configuration (defaults to DEFAULT_CONFIG)
        value_type: Type used to serialize ``value`` (defaults to its runtime type)
        file_system: Filesystem adapter (defaults to the real filesystem)

    Raises:
        AlreadyExistsError: If ``path`` exists and ``overwrite`` is False
        JsonFormatError, TomlFormatError: If encoding fails
        StorageIOError: If the existence check or the write fails
    """
    config = config or DEFAULT_CONFIG
    fs = file_system or default_file_system

    if not overwrite:
        try:
            exists = fs.exists(path)
        except OSError as e:
            raise StorageIOError(e, path) from e
        if exists:
            raise AlreadyExistsError(path)

    text = _to_text(value, format, config, value_type, path)
    try:
        payload = text.encode(config.io.encoding)
    except UnicodeEncodeError as e:
        raise format_error_for(format, Stage.ENCODE, str(e), path) from e

    try:
        fs.write_bytes(path, payload, overwrite=overwrite, atomic=config.io.atomic_write)
    except FileExistsError as e:
        if overwrite:
            raise StorageIOError(e, path) from e
        raise AlreadyExistsError(path, e) from e
    except OSError as e:
        raise StorageIOError(e, path) from e

    logger.debug(
        f"Saved {type(value).__name__} to {os.fspath(path)} as {format.value} "
        f"({len(payload)} bytes)"
    )


def load(
    value_type: type[T],
    path: PathLike,
    format: Format = Format.JSON,
    *,
    config: StorageConfig | None = None,
    file_system: FileSystemLike | None = None,
) -> T:
    """
    Load a ``value_type`` instance from ``path`` in ``format``.

    Args:
        value_type: Type to reconstruct
        path: Source file path
        format: Serialization format
        config: Storage configuration (defaults to DEFAULT_CONFIG)
        file_system: Filesystem adapter (defaults to the real filesystem)

    Returns:
        A fully validated ``value_type`` instance

    Raises:
        StorageIOError: If the file cannot be read
        JsonFormatError, TomlFormatError: If the content is malformed or does
            not match ``value_type``
    """
    config = config or DEFAULT_CONFIG
    fs = file_system or default_file_system

    try:
        raw = fs.read_bytes(path)
    except OSError as e:
        raise StorageIOError(e, path) from e

    try:
        text = raw.decode(config.io.encoding)
    except UnicodeDecodeError as e:
        raise format_error_for(format, Stage.DECODE, str(e), path) from e

    value = _from_text(value_type, text, format, config, path)
    logger.debug(
        f"Loaded {_type_name(value_type)} from {os.fspath(path)} as {format.value} "
        f"({len(raw)} bytes)"
    )
    return value


def save_by_extension(
    value: Any,
    path: PathLike,
    overwrite: bool = False,
    *,
    config: StorageConfig | None = None,
    value_type: Any = None,
    file_system: FileSystemLike | None = None,
) -> None:
    """
    Save ``value`` to ``path`` in the format named by the path's extension.

    Raises:
        UnsupportedExtensionError: If the extension is missing or not
            recognized; the filesystem is not touched
        AlreadyExistsError, StorageIOError, JsonFormatError, TomlFormatError:
            As for :func:`save`
    """
    format = format_for_path(path)
    save(
        value,
        path,
        overwrite,
        format,
        config=config,
        value_type=value_type,
        file_system=file_system,
    )


def load_by_extension(
    value_type: type[T],
    path: PathLike,
    *,
    config: StorageConfig | None = None,
    file_system: FileSystemLike | None = None,
) -> T:
    """
    Load a ``value_type`` instance from ``path`` in the format named by the
    path's extension.

    Raises:
        UnsupportedExtensionError: If the extension is missing or not
            recognized; the file is not opened
        StorageIOError, JsonFormatError, TomlFormatError: As for :func:`load`
    """
    format = format_for_path(path)
    return load(value_type, path, format, config=config, file_system=file_system)


def _to_text(
    value: Any,
    format: Format,
    config: StorageConfig,
    value_type: Any = None,
    path: PathLike | None = None,
) -> str:
    adapter: TypeAdapter[Any] = TypeAdapter(value_type if value_type is not None else type(value))
    serializer = get_serializer(format, config)
    try:
        # Aliases are what validate_python expects on load
        data = adapter.dump_python(value, mode="json", by_alias=True)
        return serializer.encode(data)
    except (TypeError, ValueError) as e:
        # PydanticSerializationError is a ValueError
        raise format_error_for(format, Stage.ENCODE, str(e), path) from e


def _from_text(
    value_type: type[T],
    text: str,
    format: Format,
    config: StorageConfig,
    path: PathLike | None = None,
) -> T:
    adapter: TypeAdapter[T] = TypeAdapter(value_type)
    serializer = get_serializer(format, config)
    try:
        data = serializer.decode(text)
        return adapter.validate_python(data)
    except (ValidationError, TypeError, ValueError) as e:
        raise format_error_for(format, Stage.DECODE, str(e), path) from e


def _type_name(value_type: Any) -> str:
    return getattr(value_type, "__name__", repr(value_type))
