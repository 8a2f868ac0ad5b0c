#!/usr/bin/env python3
"""
easy_storage Configuration Package

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .builder import (
    ConfigBuilder,
    create_compact_config,
    create_default_config,
    create_durable_config,
)
from .schemas import DEFAULT_CONFIG, IOConfig, JsonConfig, StorageConfig, TomlConfig

__all__ = [
    # Schema classes
    "StorageConfig",
    "IOConfig",
    "JsonConfig",
    "TomlConfig",
    "DEFAULT_CONFIG",
    # Builder classes and helpers
    "ConfigBuilder",
    "create_default_config",
    "create_compact_config",
    "create_durable_config",
]
