# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata
import sys

import click
from loguru import logger

from symseek.cmd.config import config
from symseek.cmd.trace import trace


@click.group()
@click.version_option(
    importlib.metadata.version("symseek"),
    "--version",
    "-v",
    message="%(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        case_sensitive=False,
    ),
    default="INFO",
)
def main(log_level="INFO"):
    # Can't change the logging level; need to remove and add a new logger with the desired log level
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())


@click.command("version")
def version():
    """Print version information."""
    click.echo(importlib.metadata.version("symseek"))


main.add_command(trace)
main.add_command(config)
main.add_command(version)


if __name__ == "__main__":
    main()
