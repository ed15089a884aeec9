# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import errno
import os
from typing import List, Optional, Set, Tuple

from loguru import logger

from symseek.chaintypes import ChainHop, FileKind, LinkKind, ResolutionChain
from symseek.config import ResolverSettings
from symseek.detectors import detect_wrapper
from symseek.errors import CycleDetectedError, InvalidInputError, SymlinkResolutionError
from symseek.filetypeid import FileType, classify
from symseek.utils.paths import resolve_link_target

_BINARY_FILE_TYPES = (FileType.ELF_BINARY, FileType.OTHER_BINARY)


def resolve(path: str, settings: Optional[ResolverSettings] = None) -> ResolutionChain:
    """
    Follow every symlink and wrapper starting at ``path`` until a file that doesn't
    redirect anywhere else is reached.

    Each iteration looks at one path: a symlink is followed first, then the file it
    lands on is classified, and shell scripts and ELF binaries are checked for a
    wrapper target. Every path passed through becomes one hop of the returned chain,
    the last of which is the terminal file.

    ---
    Parameters
    ----------
    path : str
        Absolute path of the entry point, e.g. "/run/current-system/sw/bin/nvim".
    settings : Optional[ResolverSettings]
        Store directory, wrapper marker and size limit used by the wrapper detectors.
        Defaults to ResolverSettings().

    ---
    Returns
    -------
    ResolutionChain
        ``origin`` is ``path``; the hops are in traversal order and only the last one
        has ``is_final`` set.

    ---
    Raises
    ------
    InvalidInputError
        ``path``, or a wrapper target found along the way, is not absolute.
    CycleDetectedError
        A path is visited twice.
    SymlinkResolutionError
        A symlink could not be read.
    FileIoError
        A file's metadata or content could not be read.

    No partial chain is returned when an error is raised.
    """
    logger.debug(f"resolve called for: {path}")
    if not os.path.isabs(path):
        raise InvalidInputError("Path must be absolute", path)
    if settings is None:
        settings = ResolverSettings()

    hops: List[ChainHop] = []
    visited: Set[str] = set()
    current = path
    iteration = 0

    while True:
        iteration += 1
        logger.trace(f"Iteration {iteration}: processing {current}")

        # Wrapper targets are taken as found in the file
        if not os.path.isabs(current):
            raise InvalidInputError(f"Wrapper target {current!r} is not an absolute path", current)

        if current in visited:
            logger.debug(f"Cycle detected at: {current}")
            raise CycleDetectedError(current)
        visited.add(current)

        current, was_symlink = _follow_symlink(current)

        file_type = classify(current)
        logger.debug(f"File type detected: {file_type.name}")

        redirect = detect_wrapper(current, file_type, settings)
        if redirect is not None:
            target, link_kind = redirect
            logger.debug(f"Found wrapper, following to: {target}")
            hops.append(ChainHop(current, False, link_kind))
            current = target
            continue

        if was_symlink and file_type is FileType.SYMLINK:
            hops.append(ChainHop(current, False, LinkKind.symlink()))
            continue

        logger.trace(f"Reached terminal node: {current}")
        hops.append(ChainHop(current, True, LinkKind.terminal(_terminal_file_kind(file_type))))
        break

    logger.debug(f"Resolution complete: {len(hops)} link(s) in chain")
    return ResolutionChain(origin=path, hops=tuple(hops))


def _follow_symlink(path: str) -> Tuple[str, bool]:
    """Return the target of ``path`` and True if it is a symlink, else ``path`` and False."""
    try:
        target = os.readlink(path)
    except OSError as err:
        if err.errno == errno.EINVAL:
            logger.trace(f"Not a symlink: {path}")
            return path, False
        logger.debug(f"Error reading symlink {path}: {err}")
        raise SymlinkResolutionError(path, err.strerror or str(err)) from err

    resolved = resolve_link_target(path, target)
    logger.debug(f"Found symlink: {path} -> {target}")
    return resolved, True


def _terminal_file_kind(file_type: FileType) -> FileKind:
    if file_type in _BINARY_FILE_TYPES:
        return FileKind.BINARY
    return FileKind.TEXT
