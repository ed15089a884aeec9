# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import sys

import click
from loguru import logger

from symseek.config import load_settings
from symseek.errors import SymseekError
from symseek.locator import LocationSource, find_file
from symseek.output import OutputFormat, json_writer, tree_writer
from symseek.resolver import resolve


@click.command("trace")
@click.argument("target", type=str, required=True)
@click.option(
    "--json",
    "output_format",
    flag_value=OutputFormat.JSON.value,
    help="Print the chain as JSON instead of a tree",
)
@click.option(
    "--tree",
    "output_format",
    flag_value=OutputFormat.TREE.value,
    default=True,
    help="Print the chain as a tree (default)",
)
def trace(target: str, output_format: str):
    """Trace TARGET through every symlink and wrapper to what it finally runs.

    TARGET containing a path separator is looked up from the current directory;
    a bare program name is looked up in every PATH entry.
    """
    try:
        settings = load_settings()
        location = find_file(target)
        # every location is resolved before anything is printed
        chains = [resolve(path, settings) for path in location.paths]
    except SymseekError as err:
        logger.debug(f"Resolution of {target} failed: {err!r}")
        click.echo(f"Error: {err}", err=True)
        sys.exit(1)

    outfile = click.get_text_stream("stdout")
    if OutputFormat(output_format) is OutputFormat.JSON:
        json_writer.write_chains(chains, outfile)
    else:
        tree_writer.write_chains(
            chains,
            outfile,
            from_path_search=location.source is LocationSource.PATH_ENVIRONMENT,
        )
