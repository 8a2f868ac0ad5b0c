#!/usr/bin/env python3
"""
Storage Error Taxonomy

Every failure raised by easy_storage derives from StorageError and names
the stage it came from:

    StorageIOError              reading or writing the file failed
        AlreadyExistsError      the overwrite guard refused to replace a file
    FormatError                 encoding or decoding failed
        JsonFormatError         ... for Format.JSON
        TomlFormatError         ... for Format.TOML
    UnsupportedExtensionError   no Format could be inferred from the path

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import errno as errno_codes
import os
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .formats import Format


class ErrorCategory(Enum):
    """Stage of a save/load operation that failed"""

    FILE_ACCESS = "file_access"  # Filesystem read or write
    SERIALIZATION = "serialization"  # Codec encode or decode
    SELECTION = "selection"  # Extension to format inference


class Stage(Enum):
    """Direction of a codec failure"""

    ENCODE = "encode"
    DECODE = "decode"


class StorageError(Exception):
    """Base class for all easy_storage errors"""

    category: ErrorCategory

    def __init__(self, message: str, path: str | os.PathLike[str] | None = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization"""
        return {
            "error_type": type(self).__name__,
            "category": self.category.value,
            "message": self.message,
            "path": os.fspath(self.path) if self.path is not None else None,
        }


class StorageIOError(StorageError):
    """
    Reading or writing the target file failed.

    Attributes:
        os_error: The underlying OSError (also available as ``__cause__``)
        already_exists: True only for overwrite guard refusals
    """

    category = ErrorCategory.FILE_ACCESS
    already_exists = False

    def __init__(self, os_error: OSError, path: str | os.PathLike[str] | None = None):
        message = os_error.strerror or str(os_error)
        if path is not None:
            message = f"{message}: '{os.fspath(path)}'"
        super().__init__(message, path)
        self.os_error = os_error

    @property
    def errno(self) -> int | None:
        return self.os_error.errno

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["errno"] = self.errno
        data["already_exists"] = self.already_exists
        return data


class AlreadyExistsError(StorageIOError):
    """A file already exists at the target path and overwrite was not requested."""

    already_exists = True

    def __init__(self, path: str | os.PathLike[str], os_error: OSError | None = None):
        if os_error is None:
            os_error = FileExistsError(
                errno_codes.EEXIST, os.strerror(errno_codes.EEXIST), os.fspath(path)
            )
        super().__init__(os_error, path)
        self.message = f"file already exists: '{os.fspath(path)}' (pass overwrite=True to replace it)"
        self.args = (self.message,)


class FormatError(StorageError):
    """
    The codec for a format failed to encode or decode a value.

    Attributes:
        format: The Format whose codec failed
        stage: Stage.ENCODE or Stage.DECODE
    """

    category = ErrorCategory.SERIALIZATION

    def __init__(
        self,
        format: Format,
        stage: Stage,
        message: str,
        path: str | os.PathLike[str] | None = None,
    ):
        super().__init__(f"{format.value} {stage.value} error: {message}", path)
        self.format = format
        self.stage = stage
        self.detail = message

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["format"] = self.format.value
        data["stage"] = self.stage.value
        return data


class JsonFormatError(FormatError):
    """JSON encode/decode failure"""


class TomlFormatError(FormatError):
    """TOML encode/decode failure"""


class UnsupportedExtensionError(StorageError):
    """The path extension does not map to any supported format."""

    category = ErrorCategory.SELECTION

    def __init__(self, extension: str | None, path: str | os.PathLike[str] | None = None):
        if extension is None:
            message = "path has no extension"
        else:
            message = f"unsupported extension: '{extension}'"
        if path is not None:
            message = f"{message} ({os.fspath(path)})"
        super().__init__(message, path)
        self.extension = extension

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["extension"] = self.extension
        return data


def format_error_for(
    format: Format,
    stage: Stage,
    message: str,
    path: str | os.PathLike[str] | None = None,
) -> FormatError:
    """Build the FormatError subclass matching ``format``."""
    from .formats import Format

    if format is Format.JSON:
        return JsonFormatError(format, stage, message, path)
    if format is Format.TOML:
        return TomlFormatError(format, stage, message, path)
    raise ValueError(f"Unknown format: {format!r}")
