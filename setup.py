#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in source checkouts
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Save and load structured values as JSON or TOML files"

setup(
    name="easy_storage",
    version="1.0.0",
    description="Save and load structured values as JSON or TOML files",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["easy_storage", "easy_storage.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "tomli-w>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
