#!/usr/bin/env python3
"""
Text Serializers

One serializer per Format. Serializers translate between plain data
(dicts, lists, strings, numbers, booleans) and document text; turning
typed values into plain data is done by pydantic in the persistence layer.

Serializers raise the native exceptions of their codec (TypeError or
ValueError subclasses such as json.JSONDecodeError and
tomllib.TOMLDecodeError). Mapping those to FormatError is left to the
caller, which knows the path and the stage.

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import json
import tomllib
from typing import Any

import tomli_w

from .config_schemas import DEFAULT_CONFIG, JsonConfig, StorageConfig, TomlConfig
from .formats import Format
from .interfaces import SerializerLike


class JsonSerializer:
    """Pretty-printed JSON documents."""

    format = Format.JSON

    def __init__(self, config: JsonConfig | None = None):
        self.config = config or JsonConfig()

    def encode(self, data: Any) -> str:
        # NaN and Infinity are not valid JSON
        return json.dumps(
            data,
            indent=self.config.indent,
            sort_keys=self.config.sort_keys,
            ensure_ascii=self.config.ensure_ascii,
            allow_nan=False,
        )

    def decode(self, text: str) -> Any:
        return json.loads(text)


class TomlSerializer:
    """TOML documents. The top level value must be a table."""

    format = Format.TOML

    def __init__(self, config: TomlConfig | None = None):
        self.config = config or TomlConfig()

    def encode(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise TypeError(
                f"TOML documents must be a table at the top level, got {type(data).__name__}"
            )
        return tomli_w.dumps(_drop_none(data), multiline_strings=self.config.multiline_strings)

    def decode(self, text: str) -> Any:
        return tomllib.loads(text)


def _drop_none(table: dict[str, Any]) -> dict[str, Any]:
    """Remove None entries from tables; TOML has no null."""
    result: dict[str, Any] = {}
    for key, value in table.items():
        if value is None:
            continue
        result[key] = _drop_none_in(value)
    return result


def _drop_none_in(value: Any) -> Any:
    if isinstance(value, dict):
        return _drop_none(value)
    if isinstance(value, list):
        return [_drop_none_in(item) for item in value]
    return value


def get_serializer(format: Format, config: StorageConfig | None = None) -> SerializerLike:
    """Return the serializer for ``format`` configured from ``config``."""
    config = config or DEFAULT_CONFIG
    if format is Format.JSON:
        return JsonSerializer(config.json)
    if format is Format.TOML:
        return TomlSerializer(config.toml)
    raise ValueError(f"Unknown format: {format!r}")
