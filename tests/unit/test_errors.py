#!/usr/bin/env python3
"""Tests for the storage error taxonomy."""

import errno

import pytest

from easy_storage.errors import (
    AlreadyExistsError,
    ErrorCategory,
    FormatError,
    JsonFormatError,
    Stage,
    StorageError,
    StorageIOError,
    TomlFormatError,
    UnsupportedExtensionError,
    format_error_for,
)
from easy_storage.formats import Format


def test_hierarchy():
    assert issubclass(StorageIOError, StorageError)
    assert issubclass(AlreadyExistsError, StorageIOError)
    assert issubclass(JsonFormatError, FormatError)
    assert issubclass(TomlFormatError, FormatError)
    assert issubclass(FormatError, StorageError)
    assert issubclass(UnsupportedExtensionError, StorageError)
    assert not issubclass(StorageIOError, OSError)


def test_storage_io_error_wraps_os_error():
    os_error = FileNotFoundError(errno.ENOENT, "No such file or directory", "missing.json")
    err = StorageIOError(os_error, "missing.json")

    assert err.os_error is os_error
    assert err.errno == errno.ENOENT
    assert err.already_exists is False
    assert err.category is ErrorCategory.FILE_ACCESS
    assert str(err) == "No such file or directory: 'missing.json'"


def test_storage_io_error_without_strerror():
    err = StorageIOError(OSError("disk on fire"))
    assert str(err) == "disk on fire"
    assert err.errno is None
    assert err.path is None


def test_already_exists_error_defaults():
    err = AlreadyExistsError("user.json")

    assert err.already_exists is True
    assert err.errno == errno.EEXIST
    assert isinstance(err.os_error, FileExistsError)
    assert "already exists" in str(err)
    assert "overwrite=True" in str(err)


def test_already_exists_error_keeps_given_os_error():
    os_error = FileExistsError(errno.EEXIST, "File exists", "user.json")
    err = AlreadyExistsError("user.json", os_error)
    assert err.os_error is os_error


@pytest.mark.parametrize(
    "fmt,expected_cls",
    [(Format.JSON, JsonFormatError), (Format.TOML, TomlFormatError)],
)
def test_format_error_for(fmt, expected_cls):
    err = format_error_for(fmt, Stage.DECODE, "bad input", "user.x")

    assert type(err) is expected_cls
    assert err.format is fmt
    assert err.stage is Stage.DECODE
    assert err.detail == "bad input"
    assert err.category is ErrorCategory.SERIALIZATION
    assert str(err) == f"{fmt.value} decode error: bad input"


def test_format_error_for_unknown_format():
    with pytest.raises(ValueError):
        format_error_for("yaml", Stage.ENCODE, "nope")


def test_unsupported_extension_messages():
    assert str(UnsupportedExtensionError("bin")) == "unsupported extension: 'bin'"
    assert str(UnsupportedExtensionError(None)) == "path has no extension"
    assert str(UnsupportedExtensionError(None, path="README")) == "path has no extension (README)"


def test_to_dict():
    data = AlreadyExistsError("user.json").to_dict()
    assert data["error_type"] == "AlreadyExistsError"
    assert data["category"] == "file_access"
    assert data["path"] == "user.json"
    assert data["errno"] == errno.EEXIST
    assert data["already_exists"] is True

    data = format_error_for(Format.TOML, Stage.ENCODE, "boom").to_dict()
    assert data["error_type"] == "TomlFormatError"
    assert data["format"] == "toml"
    assert data["stage"] == "encode"
    assert data["path"] is None

    data = UnsupportedExtensionError("bin").to_dict()
    assert data["category"] == "selection"
    assert data["extension"] == "bin"
