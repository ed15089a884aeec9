# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import pathlib
from typing import Optional

from loguru import logger

from symseek.config import ResolverSettings
from symseek.errors import FileIoError
from symseek.utils.strings import extract_printable

WRAPPED_SUFFIX = "-wrapped"
UNWRAPPED_SUFFIX = "-unwrapped"


def read_text_view(path: str, settings: ResolverSettings, detector_name: str) -> Optional[str]:
    """Return the content of ``path`` as text for pattern matching.

    Files larger than ``settings.max_detect_size`` are skipped (None) without being read.
    Content that is not valid UTF-8 is reduced to its printable strings.

    Raises:
        FileIoError: if the file cannot be stat'ed or read.
    """
    try:
        size = os.stat(path).st_size
    except OSError as err:
        raise FileIoError(f"Failed to read metadata for {path}", path, str(err)) from err
    logger.trace(f"{detector_name}: file size = {size} bytes")
    if size > settings.max_detect_size:
        logger.debug(f"{detector_name}: {path} is too large to inspect")
        return None

    try:
        with open(path, "rb") as f:
            data = f.read(settings.max_detect_size + 1)
    except OSError as err:
        raise FileIoError(f"Failed to read file {path}", path, str(err)) from err
    # the file grew after it was stat'ed
    if len(data) > settings.max_detect_size:
        logger.debug(f"{detector_name}: {path} is too large to inspect")
        return None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return extract_printable(data)


def normalize_program_name(name: str) -> str:
    """Strip the decorations wrapper generators add to a program's file name.

    >>> normalize_program_name(".nvim-wrapped")
    'nvim'
    """
    if name.startswith("."):
        name = name[1:]
    if name.endswith(UNWRAPPED_SUFFIX):
        name = name[: -len(UNWRAPPED_SUFFIX)]
    elif name.endswith(WRAPPED_SUFFIX):
        name = name[: -len(WRAPPED_SUFFIX)]
    return name


def programs_match(current: str, candidate: str) -> bool:
    """True when both paths name the same program once wrapper decorations are removed."""
    current_name = normalize_program_name(pathlib.PurePosixPath(current).name)
    candidate_name = normalize_program_name(pathlib.PurePosixPath(candidate).name)
    return current_name != "" and current_name == candidate_name


def same_path(first: str, second: str) -> bool:
    return pathlib.PurePosixPath(first) == pathlib.PurePosixPath(second)


def is_store_path(candidate: str, store_dir: str) -> bool:
    return candidate.startswith(store_dir.rstrip("/") + "/")
