# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List, Optional


class SymseekError(Exception):
    """Base class for every error raised while locating or resolving a path."""


class NotFoundError(SymseekError):
    def __init__(self, name: str, searched_locations: List[str]):
        self.name = name
        self.searched_locations = list(searched_locations)
        super().__init__(f"File '{name}' not found in {self.searched_locations}")


class InvalidInputError(SymseekError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"Invalid input: {message}")


class FileIoError(SymseekError):
    """A stat or read failure, with a human-readable context naming the path.

    The originating OSError is kept as ``__cause__`` by raising with ``from``.
    """

    def __init__(self, context: str, path: str, reason: str = ""):
        self.context = context
        self.path = path
        self.reason = reason
        super().__init__(f"{context}: {reason}" if reason else context)


class SymlinkResolutionError(SymseekError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to resolve symlink at '{path}': {reason}")


class CycleDetectedError(SymseekError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cycle detected in chain at '{path}'")


class WrapperParsingError(SymseekError):
    """Reserved: detectors report an unparseable wrapper as "no match"."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse wrapper at '{path}': {reason}")


class PathEncodingError(SymseekError):
    """Reserved: renderers substitute a placeholder instead of raising."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid path encoding: {path!r}")
