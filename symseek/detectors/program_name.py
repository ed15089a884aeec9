# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import functools
import os
import re
from typing import Optional

from loguru import logger

from symseek.config import ResolverSettings

from ._common import programs_match, read_text_view, same_path

DETECTOR_NAME = "ProgramNameDetector"

# Quoting and shell expansions that the store path pattern drags along
STRAY_TRAILING_CHARS = "\"'$"


@functools.lru_cache(maxsize=None)
def store_path_pattern(store_dir: str) -> re.Pattern:
    """Compiled ``<store_dir>/<hash>-<name>(/<segment>)*`` pattern, built once per store."""
    prefix = re.escape(store_dir.rstrip("/"))
    return re.compile(prefix + r"/[a-z0-9]+-[^/\s\x00]+(?:/[^/\s\x00]+)*")


def detect(path: str, settings: ResolverSettings) -> Optional[str]:
    """Find a store path in the content of ``path`` that names the same program.

    ``/run/current-system/sw/bin/.nvim-wrapped`` matches
    ``/nix/store/<hash>-neovim/bin/nvim``: names are compared after
    normalize_program_name(). Candidates are tried in order of appearance and the first
    existing regular file wins, which can pick the wrong file when several store paths
    with the same program name come before the real target.
    """
    logger.trace(f"{DETECTOR_NAME}: checking {path}")
    content = read_text_view(path, settings, DETECTOR_NAME)
    if content is None:
        return None

    for match in store_path_pattern(settings.store_dir).finditer(content):
        candidate = match.group(0).rstrip(STRAY_TRAILING_CHARS)
        logger.trace(f"{DETECTOR_NAME}: found path in content: {candidate}")

        names_match = programs_match(path, candidate)
        is_file = names_match and os.path.isfile(candidate)
        not_same = not same_path(candidate, path)
        logger.trace(f"  names_match={names_match}, is_file={is_file}, not_same={not_same}")

        if names_match and is_file and not_same:
            logger.debug(f"{DETECTOR_NAME}: found matching path: {candidate}")
            return candidate

    logger.trace(f"{DETECTOR_NAME}: no target path")
    return None
