#!/usr/bin/env python3
"""Tests for the filesystem adapter."""

import os
import stat
from unittest.mock import patch

import pytest

from easy_storage.adapters.file_system import FileSystemAdapter, default_file_system


def test_default_instance():
    assert isinstance(default_file_system, FileSystemAdapter)


def test_exists(workdir):
    fs = FileSystemAdapter()
    target = workdir / "a.json"
    assert fs.exists(target) is False
    target.write_text("{}")
    assert fs.exists(target) is True
    assert fs.exists(str(target)) is True


def test_read_bytes(workdir):
    target = workdir / "a.json"
    target.write_bytes(b'{"a": 1}')
    assert FileSystemAdapter().read_bytes(target) == b'{"a": 1}'


def test_read_bytes_missing(workdir):
    with pytest.raises(FileNotFoundError):
        FileSystemAdapter().read_bytes(workdir / "missing.json")


def test_write_bytes_creates_file(workdir):
    target = workdir / "a.json"
    FileSystemAdapter().write_bytes(target, b"first")
    assert target.read_bytes() == b"first"


def test_write_bytes_exclusive_without_overwrite(workdir):
    target = workdir / "a.json"
    target.write_bytes(b"original")
    with pytest.raises(FileExistsError):
        FileSystemAdapter().write_bytes(target, b"second")
    assert target.read_bytes() == b"original"


def test_write_bytes_overwrite_truncates(workdir):
    target = workdir / "a.json"
    target.write_bytes(b"a much longer original payload")
    FileSystemAdapter().write_bytes(target, b"short", overwrite=True)
    assert target.read_bytes() == b"short"


def test_write_bytes_missing_parent(workdir):
    with pytest.raises(FileNotFoundError):
        FileSystemAdapter().write_bytes(workdir / "nope" / "a.json", b"x")
    assert not (workdir / "nope").exists()


@pytest.mark.parametrize("overwrite", [False, True])
def test_atomic_write_creates_file(workdir, overwrite):
    target = workdir / "a.toml"
    FileSystemAdapter().write_bytes(target, b"x = 1\n", overwrite=overwrite, atomic=True)
    assert target.read_bytes() == b"x = 1\n"
    assert os.listdir(workdir) == ["a.toml"]


def test_atomic_write_replaces_with_overwrite(workdir):
    target = workdir / "a.toml"
    target.write_bytes(b"old = true\n")
    FileSystemAdapter().write_bytes(target, b"new = true\n", overwrite=True, atomic=True)
    assert target.read_bytes() == b"new = true\n"
    assert os.listdir(workdir) == ["a.toml"]


def test_atomic_write_refuses_existing_without_overwrite(workdir):
    target = workdir / "a.toml"
    target.write_bytes(b"old = true\n")
    with pytest.raises(FileExistsError):
        FileSystemAdapter().write_bytes(target, b"new = true\n", atomic=True)
    assert target.read_bytes() == b"old = true\n"
    assert os.listdir(workdir) == ["a.toml"]


def test_atomic_write_cleans_up_on_failure(workdir):
    target = workdir / "a.toml"
    with patch("easy_storage.adapters.file_system.os.replace", side_effect=PermissionError):
        with pytest.raises(PermissionError):
            FileSystemAdapter().write_bytes(target, b"x = 1\n", overwrite=True, atomic=True)
    assert os.listdir(workdir) == []


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
@pytest.mark.parametrize("overwrite", [False, True])
def test_atomic_write_matches_plain_write_mode(workdir, overwrite):
    fs = FileSystemAdapter()
    plain = workdir / "plain.toml"
    atomic = workdir / "atomic.toml"

    fs.write_bytes(plain, b"x = 1\n", overwrite=overwrite)
    fs.write_bytes(atomic, b"x = 1\n", overwrite=overwrite, atomic=True)

    assert stat.S_IMODE(atomic.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_atomic_overwrite_keeps_existing_mode(workdir):
    target = workdir / "a.toml"
    target.write_bytes(b"old = true\n")
    target.chmod(0o640)

    FileSystemAdapter().write_bytes(target, b"new = true\n", overwrite=True, atomic=True)

    assert stat.S_IMODE(target.stat().st_mode) == 0o640
    assert target.read_bytes() == b"new = true\n"
