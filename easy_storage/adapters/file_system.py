#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


class FileSystemAdapter:
    """
    Provide a minimal filesystem access abstraction.

    Every call opens and closes its own handle. OSError propagates to the
    caller unchanged. Parent directories are never created.
    """

    def exists(self, path: str | os.PathLike[str]) -> bool:
        return Path(path).exists()

    def read_bytes(self, path: str | os.PathLike[str]) -> bytes:
        file_path = Path(path)
        with file_path.open("rb") as handle:
            return handle.read()

    def write_bytes(
        self,
        path: str | os.PathLike[str],
        data: bytes,
        *,
        overwrite: bool = False,
        atomic: bool = False,
    ) -> None:
        """
        Write ``data`` as the whole content of ``path``.

        With ``overwrite=False`` the file is created exclusively and
        FileExistsError is raised if it is already there. With
        ``atomic=True`` the data is written to a temporary sibling file,
        flushed to disk and then moved into place.
        """
        file_path = Path(path)
        if atomic:
            self._write_atomic(file_path, data, overwrite)
            return

        with file_path.open("wb" if overwrite else "xb") as handle:
            handle.write(data)

    def _write_atomic(self, file_path: Path, data: bytes, overwrite: bool) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            # mkstemp creates 0600; match what a plain write would leave
            os.chmod(tmp_path, _target_mode(file_path, overwrite))
            if overwrite:
                os.replace(tmp_path, file_path)
            else:
                # link() refuses to replace an existing target
                os.link(tmp_path, file_path)
        finally:
            tmp_path.unlink(missing_ok=True)


def _target_mode(file_path: Path, overwrite: bool) -> int:
    """Permission bits for the file at ``file_path`` after a write."""
    if overwrite:
        try:
            return stat.S_IMODE(file_path.stat().st_mode)
        except FileNotFoundError:
            pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


default_file_system = FileSystemAdapter()
