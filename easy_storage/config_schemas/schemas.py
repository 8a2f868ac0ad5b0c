#!/usr/bin/env python3
"""
easy_storage Configuration Schemas - Typed Dataclasses

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import codecs
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class IOConfig:
    """Filesystem access settings"""

    encoding: str = "utf-8"
    atomic_write: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e


@dataclass(frozen=True)
class JsonConfig:
    """JSON codec settings"""

    indent: int | None = 2
    sort_keys: bool = False
    ensure_ascii: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        if self.indent is not None and self.indent < 0:
            raise ValueError("indent must be non-negative")


@dataclass(frozen=True)
class TomlConfig:
    """TOML codec settings"""

    multiline_strings: bool = False


@dataclass(frozen=True)
class StorageConfig:
    """Main easy_storage configuration container"""

    io: IOConfig = field(default_factory=IOConfig)
    json: JsonConfig = field(default_factory=JsonConfig)
    toml: TomlConfig = field(default_factory=TomlConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "StorageConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "io" in config_dict:
            kwargs["io"] = IOConfig(**config_dict["io"])

        if "json" in config_dict:
            kwargs["json"] = JsonConfig(**config_dict["json"])

        if "toml" in config_dict:
            kwargs["toml"] = TomlConfig(**config_dict["toml"])

        return cls(**kwargs)

    def merge(self, other: "StorageConfig") -> "StorageConfig":
        """Merge with another configuration, with other taking precedence"""
        return StorageConfig.from_dict({**self.to_dict(), **other.to_dict()})


DEFAULT_CONFIG = StorageConfig()
