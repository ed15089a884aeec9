# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="symseek",
    version="0.1.0",
    description="Trace symlinks and generated wrappers to the program they finally run",
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(include=["symseek", "symseek.*"]),
    install_requires=[
        "click>=8.0",  # Command line interface
        "loguru",  # Logging
        "tomlkit>=0.11",  # Configuration file, preserves comments
        "dataclasses-json",  # JSON output of resolution chains
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "symseek=symseek.__main__:main",
        ],
    },
)
