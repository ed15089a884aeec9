# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from ._chain import ChainHop, HopMetadata, ResolutionChain
from ._kinds import FileKind, LinkCategory, LinkKind, ScriptKind, WrapperKind

__all__ = [
    "ChainHop",
    "HopMetadata",
    "ResolutionChain",
    "FileKind",
    "LinkCategory",
    "LinkKind",
    "ScriptKind",
    "WrapperKind",
]
