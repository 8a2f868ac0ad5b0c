#!/usr/bin/env python3
"""
Example: Persisting a Model with easy_storage

This example saves a small model as TOML and JSON, reads it back and shows
how the overwrite guard and extension inference report failures.

Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from easy_storage import (
    AlreadyExistsError,
    Format,
    Storeable,
    StorageError,
    UnsupportedExtensionError,
    load_by_extension,
    save_by_extension,
)


class User(Storeable):
    name: str
    email: str


@dataclass
class Settings:
    theme: str
    font_size: int


def example_1_save_and_load(workdir: Path):
    """Example 1: Save and load by extension"""
    print("=" * 60)
    print("Example 1: Save and Load by Extension")
    print("=" * 60)

    user = User(name="Alice", email="alice@alice.com")
    save_path = workdir / "user.toml"

    user.save_by_extension(save_path, overwrite=True)
    print(save_path.read_text())

    loaded = User.load_by_extension(save_path)
    print(f"Loaded: {loaded!r}")
    print(f"Equal to original: {loaded == user}")
    print()


def example_2_explicit_format(workdir: Path):
    """Example 2: Explicit format, independent of the extension"""
    print("=" * 60)
    print("Example 2: Explicit Format")
    print("=" * 60)

    user = User(name="Bob", email="bob@bob.com")
    save_path = workdir / "user.data"

    user.save(save_path, overwrite=True, format=Format.JSON)
    print(save_path.read_text())
    print(f"Loaded: {User.load(save_path, Format.JSON)!r}")
    print()


def example_3_overwrite_guard(workdir: Path):
    """Example 3: The overwrite guard"""
    print("=" * 60)
    print("Example 3: Overwrite Guard")
    print("=" * 60)

    save_path = workdir / "user.toml"
    try:
        User(name="Mallory", email="mallory@example.com").save_by_extension(save_path)
    except AlreadyExistsError as e:
        print(f"Refused: {e}")
        print(f"already_exists={e.already_exists}")
    print()


def example_4_errors(workdir: Path):
    """Example 4: Error reporting"""
    print("=" * 60)
    print("Example 4: Error Reporting")
    print("=" * 60)

    try:
        User.load_by_extension(workdir / "user.bin")
    except UnsupportedExtensionError as e:
        print(f"Unsupported: {e} (extension={e.extension!r})")

    (workdir / "broken.json").write_text("{not json")
    try:
        User.load_by_extension(workdir / "broken.json")
    except StorageError as e:
        print(f"{type(e).__name__}: {e.to_dict()}")
    print()


def example_5_plain_dataclass(workdir: Path):
    """Example 5: Types that do not subclass Storeable"""
    print("=" * 60)
    print("Example 5: Plain Dataclass")
    print("=" * 60)

    save_path = workdir / "settings.toml"
    save_by_extension(Settings(theme="dark", font_size=12), save_path, overwrite=True)
    print(f"Loaded: {load_by_extension(Settings, save_path)!r}")
    print()


def main():
    """Run all examples"""
    with tempfile.TemporaryDirectory() as tmpdir:
        workdir = Path(tmpdir)
        example_1_save_and_load(workdir)
        example_2_explicit_format(workdir)
        example_3_overwrite_guard(workdir)
        example_4_errors(workdir)
        example_5_plain_dataclass(workdir)

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
