#!/usr/bin/env python3
"""Protocol interfaces for the pluggable collaborators of the storage layer."""

import os
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .formats import Format


class SerializerLike(Protocol):
    """Text codec for one Format. Works on plain data (dicts, lists, scalars)."""

    @property
    def format(self) -> "Format": ...

    def encode(self, data: Any) -> str: ...

    def decode(self, text: str) -> Any: ...


class FileSystemLike(Protocol):
    def exists(self, path: str | os.PathLike[str]) -> bool: ...

    def read_bytes(self, path: str | os.PathLike[str]) -> bytes: ...

    def write_bytes(
        self,
        path: str | os.PathLike[str],
        data: bytes,
        *,
        overwrite: bool = False,
        atomic: bool = False,
    ) -> None: ...
