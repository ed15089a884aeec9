# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from enum import Enum
from typing import Optional, Tuple

from symseek.chaintypes import LinkKind, ScriptKind, WrapperKind
from symseek.config import ResolverSettings
from symseek.filetypeid import FileType

from . import marker, program_name
from ._common import normalize_program_name, programs_match


class WrapperDetector(Enum):
    MARKER = "marker"
    PROGRAM_NAME = "program-name"

    def detect(self, path: str, settings: ResolverSettings) -> Optional[str]:
        if self is WrapperDetector.MARKER:
            return marker.detect(path, settings)
        return program_name.detect(path, settings)


# Precedence matters: the first detector to report a target wins
DETECTOR_ORDER: Tuple[WrapperDetector, ...] = (
    WrapperDetector.MARKER,
    WrapperDetector.PROGRAM_NAME,
)

_WRAPPER_LINK_KINDS = {
    FileType.SHELL_SCRIPT: LinkKind.wrapper(WrapperKind.text(ScriptKind.SHELL)),
    FileType.ELF_BINARY: LinkKind.wrapper(WrapperKind.BINARY),
}


def detect_wrapper(
    path: str, file_type: FileType, settings: ResolverSettings
) -> Optional[Tuple[str, LinkKind]]:
    """Return the redirect target of ``path`` and the kind of wrapper it is, if any.

    Only shell scripts and ELF binaries are inspected.
    """
    link_kind = _WRAPPER_LINK_KINDS.get(file_type)
    if link_kind is None:
        return None
    for detector in DETECTOR_ORDER:
        target = detector.detect(path, settings)
        if target is not None:
            return target, link_kind
    return None


__all__ = [
    "DETECTOR_ORDER",
    "WrapperDetector",
    "detect_wrapper",
    "normalize_program_name",
    "programs_match",
]
