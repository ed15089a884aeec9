# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from enum import Enum

from loguru import logger

from symseek.errors import PathEncodingError
from symseek.utils.paths import clean_path

INVALID_PATH_PLACEHOLDER = "<invalid UTF-8>"


class OutputFormat(Enum):
    TREE = "tree"
    JSON = "json"


def format_path(path: str) -> str:
    """Clean ``path`` for display, or return a placeholder if it isn't valid UTF-8."""
    cleaned = clean_path(path)
    try:
        cleaned.encode("utf-8")
    except UnicodeEncodeError:
        # undecodable bytes show up as lone surrogates in os paths
        logger.warning(str(PathEncodingError(path)))
        return INVALID_PATH_PLACEHOLDER
    return cleaned
