# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from .chaintypes import ChainHop, ResolutionChain
from .config import ResolverSettings
from .resolver import resolve

try:
    from ._version import __version__, __version_tuple__
except ModuleNotFoundError:
    __version__ = ""
    __version_tuple__ = ()

__all__ = ["ChainHop", "ResolutionChain", "ResolverSettings", "resolve"]
