# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from dataclasses import dataclass
from typing import Optional, Tuple

from ._kinds import LinkKind


@dataclass(frozen=True)
class HopMetadata:
    # Reserved for annotating hops; the resolver does not fill it in yet
    is_broken: bool = False
    file_type: Optional[str] = None


@dataclass(frozen=True)
class ChainHop:
    target: str
    is_final: bool
    link_kind: LinkKind
    metadata: Optional[HopMetadata] = None


@dataclass(frozen=True)
class ResolutionChain:
    """Every path inspected while resolving ``origin``, in traversal order."""

    origin: str
    hops: Tuple[ChainHop, ...] = ()

    def is_empty(self) -> bool:
        return not self.hops

    @property
    def final_hop(self) -> Optional[ChainHop]:
        if self.hops and self.hops[-1].is_final:
            return self.hops[-1]
        return None
