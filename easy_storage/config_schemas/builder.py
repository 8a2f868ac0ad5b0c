#!/usr/bin/env python3
"""Fluent configuration builder."""

from typing import Any

from .schemas import IOConfig, JsonConfig, StorageConfig, TomlConfig


class ConfigBuilder:
    """Fluent API builder for StorageConfig."""

    def __init__(self) -> None:
        self._io_kwargs: dict[str, Any] = {}
        self._json_kwargs: dict[str, Any] = {}
        self._toml_kwargs: dict[str, Any] = {}

    # IO Configuration Methods
    def with_encoding(self, encoding: str) -> "ConfigBuilder":
        self._io_kwargs["encoding"] = encoding
        return self

    def with_atomic_write(self, enabled: bool = True) -> "ConfigBuilder":
        self._io_kwargs["atomic_write"] = enabled
        return self

    # JSON Configuration Methods
    def with_json_indent(self, indent: int | None) -> "ConfigBuilder":
        self._json_kwargs["indent"] = indent
        return self

    def with_sorted_keys(self, enabled: bool = True) -> "ConfigBuilder":
        self._json_kwargs["sort_keys"] = enabled
        return self

    def with_ascii_only(self, enabled: bool = True) -> "ConfigBuilder":
        self._json_kwargs["ensure_ascii"] = enabled
        return self

    # TOML Configuration Methods
    def with_multiline_strings(self, enabled: bool = True) -> "ConfigBuilder":
        self._toml_kwargs["multiline_strings"] = enabled
        return self

    # Build Method
    def build(self) -> StorageConfig:
        """Build and return the config instance."""
        return StorageConfig(
            io=IOConfig(**self._io_kwargs) if self._io_kwargs else IOConfig(),
            json=JsonConfig(**self._json_kwargs) if self._json_kwargs else JsonConfig(),
            toml=TomlConfig(**self._toml_kwargs) if self._toml_kwargs else TomlConfig(),
        )


def create_default_config() -> StorageConfig:
    return ConfigBuilder().build()


def create_compact_config() -> StorageConfig:
    return ConfigBuilder().with_json_indent(None).build()


def create_durable_config() -> StorageConfig:
    return ConfigBuilder().with_atomic_write(True).build()
