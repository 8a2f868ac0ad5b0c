#!/usr/bin/env python3
"""
easy_storage Adapters Module

Adapters isolate the storage operations from the concrete filesystem so
tests and callers can substitute their own implementation.

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .file_system import FileSystemAdapter, default_file_system

__all__ = ["FileSystemAdapter", "default_file_system"]
