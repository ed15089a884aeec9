# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import functools
import re
from typing import Optional

from loguru import logger

from symseek.config import ResolverSettings

from ._common import is_store_path, read_text_view, same_path

DETECTOR_NAME = "MarkerDetector"


@functools.lru_cache(maxsize=None)
def marker_pattern(marker: str) -> re.Pattern:
    """Compiled ``<marker> '<path>'`` pattern, built once per marker."""
    return re.compile(re.escape(marker) + r"\s+'([^']+)'")


def detect(path: str, settings: ResolverSettings) -> Optional[str]:
    """Find the program a generated wrapper was built around.

    Wrapper generators such as Nix's makeCWrapper leave their invocation behind, either
    as a script or as strings embedded in the compiled wrapper:

        makeCWrapper '/nix/store/<hash>-<name>/bin/<program>' \\
            --set FOO bar

    Only the first invocation is considered, and its path is accepted only when it is
    inside the store and is not ``path`` itself.
    """
    logger.debug(f"{DETECTOR_NAME}: checking {path}")
    content = read_text_view(path, settings, DETECTOR_NAME)
    if content is None:
        return None
    logger.trace(f"{DETECTOR_NAME}: content length = {len(content)} chars")

    if settings.wrapper_marker not in content:
        logger.trace(f"{DETECTOR_NAME}: no {settings.wrapper_marker} in content")
        return None

    # Generators may split the invocation over several lines
    normalized = content.replace("\\\n", "")

    match = marker_pattern(settings.wrapper_marker).search(normalized)
    if match is None:
        logger.trace(f"{DETECTOR_NAME}: no quoted path after {settings.wrapper_marker}")
        return None

    candidate = match.group(1)
    logger.debug(f"{DETECTOR_NAME}: found {settings.wrapper_marker} path: {candidate}")
    if not is_store_path(candidate, settings.store_dir):
        logger.debug(f"{DETECTOR_NAME}: {candidate} is not under {settings.store_dir}")
        return None
    if same_path(candidate, path):
        logger.debug(f"{DETECTOR_NAME}: {candidate} points back at the wrapper itself")
        return None

    logger.debug(f"{DETECTOR_NAME}: found target: {candidate}")
    return candidate
