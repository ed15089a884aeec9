# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import IO, Sequence

from symseek.chaintypes import ResolutionChain
from symseek.output import format_path

BRANCH = "├"
LAST = "└"
CONNECTOR = "─"


def write_chain(chain: ResolutionChain, outfile: IO[str]) -> None:
    outfile.write(format_path(chain.origin) + "\n")
    for idx, hop in enumerate(chain.hops):
        prefix = LAST if idx == len(chain.hops) - 1 else BRANCH
        outfile.write(f"{prefix}{CONNECTOR}{format_path(hop.target)}\n")


def write_chains(
    chains: Sequence[ResolutionChain], outfile: IO[str], from_path_search: bool = False
) -> None:
    """Write one tree per chain.

    Chains found by searching PATH get a match count header and a blank line after
    each tree.
    """
    if not from_path_search:
        for chain in chains:
            write_chain(chain, outfile)
        return

    outfile.write(f"Found {len(chains)} matches in PATH\n\n")
    for chain in chains:
        write_chain(chain, outfile)
        outfile.write("\n")
