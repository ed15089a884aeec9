# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import Any, List, Optional

import click

from symseek.configmanager import ConfigManager


def _convert_value(value: str) -> Any:
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    try:
        return int(value)
    except ValueError:
        return value


@click.command("config")
@click.argument("key", required=True)
@click.argument("values", nargs=-1)
def config(key: str, values: Optional[List[str]]):
    """Get or set a configuration value.

    KEY is 'section.option', e.g. 'resolver.store_dir'. With no VALUES the current
    value is shown; otherwise it is replaced by VALUES (a list if more than one).
    """
    try:
        section, option = key.split(".", 1)
    except ValueError as err:
        raise SystemExit("Invalid KEY given. Is it in the format 'section.option'?") from err

    config_manager = ConfigManager()

    if not values:
        result = config_manager.get(section, option)
        if result is None:
            click.echo(f"Configuration '{key}' not found.")
        else:
            click.echo(f"{key} = {result}")
        return

    converted_values = [_convert_value(value) for value in values]
    final_value = converted_values[0] if len(converted_values) == 1 else converted_values
    config_manager.set(section, option, final_value)
    click.echo(f"Configuration '{key}' set to '{final_value}'.")
