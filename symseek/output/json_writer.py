# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import json
from dataclasses import dataclass, field
from typing import IO, List, Optional, Sequence

from dataclasses_json import config, dataclass_json

from symseek.chaintypes import ChainHop, LinkCategory, ResolutionChain
from symseek.output import format_path


def _omit_none(value) -> bool:
    return value is None


@dataclass_json
@dataclass
class JsonLink:
    path: str
    type: str
    wrapper_kind: Optional[str] = field(default=None, metadata=config(exclude=_omit_none))
    file_kind: Optional[str] = field(default=None, metadata=config(exclude=_omit_none))
    is_final: bool = False

    @classmethod
    def from_hop(cls, hop: ChainHop) -> "JsonLink":
        link_kind = hop.link_kind
        return cls(
            path=format_path(hop.target),
            type=link_kind.category.value,
            wrapper_kind=link_kind.wrapper_kind.value if link_kind.wrapper_kind else None,
            file_kind=link_kind.file_kind.value if link_kind.file_kind else None,
            is_final=hop.is_final,
        )

    @property
    def category(self) -> LinkCategory:
        return LinkCategory(self.type)


@dataclass_json
@dataclass
class JsonChain:
    origin: str
    links: List[JsonLink] = field(default_factory=list)

    @classmethod
    def from_chain(cls, chain: ResolutionChain) -> "JsonChain":
        return cls(
            origin=format_path(chain.origin),
            links=[JsonLink.from_hop(hop) for hop in chain.hops],
        )


def chain_to_json(chain: ResolutionChain) -> str:
    return JsonChain.from_chain(chain).to_json(indent=2, ensure_ascii=False)


def chain_from_json(document: str) -> JsonChain:
    """Parse a document written by chain_to_json() back into a JsonChain."""
    return JsonChain.from_json(document)


def write_chains(chains: Sequence[ResolutionChain], outfile: IO[str]) -> None:
    """Write a single chain as a JSON object, several as a JSON array."""
    if len(chains) == 1:
        outfile.write(chain_to_json(chains[0]) + "\n")
        return
    documents = [JsonChain.from_chain(chain).to_dict() for chain in chains]
    outfile.write(json.dumps(documents, indent=2, ensure_ascii=False) + "\n")
