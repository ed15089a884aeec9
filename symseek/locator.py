# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from loguru import logger

from symseek.errors import FileIoError, InvalidInputError, NotFoundError


class LocationSource(Enum):
    CURRENT_DIRECTORY = auto()
    PATH_ENVIRONMENT = auto()


@dataclass
class FileLocation:
    source: LocationSource
    paths: List[str] = field(default_factory=list)


def find_file(name: str) -> FileLocation:
    """Find where ``name`` lives.

    A name containing a path separator is looked up relative to the current directory
    (absolute names are used as they are). A bare program name is looked up in every
    PATH entry, and every match is returned in PATH order.

    Raises:
        NotFoundError: if nothing matches.
        InvalidInputError: if PATH is needed but not set.
        FileIoError: if the current directory cannot be determined.
    """
    logger.debug(f"find_file called with: {name}")

    if os.sep in name:
        logger.debug("Input contains path separator, treating as path")
        target = os.path.join(_current_dir(), name)
        logger.trace(f"Checking if exists in cwd: {target}")
        if os.path.exists(target):
            logger.debug(f"Found path in current directory: {target}")
            return FileLocation(LocationSource.CURRENT_DIRECTORY, [target])
        raise NotFoundError(name, ["current directory"])

    logger.debug("Input is a binary name, searching in PATH")
    paths = search_in_path(name)
    if paths:
        logger.debug(f"Found {len(paths)} matches in PATH")
        return FileLocation(LocationSource.PATH_ENVIRONMENT, paths)
    raise NotFoundError(name, ["PATH"])


def search_in_path(name: str) -> List[str]:
    path_env = os.environ.get("PATH")
    if path_env is None:
        raise InvalidInputError("PATH environment variable not found")

    found_paths = []
    for directory in path_env.split(os.pathsep):
        if not directory:
            continue
        if not os.path.isabs(directory):
            directory = os.path.join(_current_dir(), directory)
        full_path = os.path.join(directory, name)
        logger.trace(f"Checking PATH entry: {full_path}")
        if os.path.exists(full_path):
            logger.trace(f"Found in PATH: {full_path}")
            found_paths.append(full_path)
    return found_paths


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError as err:
        raise FileIoError("Failed to get current directory", ".", str(err)) from err
