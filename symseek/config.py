# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from dataclasses import dataclass
from typing import Any, Dict, Optional

from loguru import logger

from symseek.configmanager import ConfigManager
from symseek.errors import InvalidInputError

DEFAULT_STORE_DIR = "/nix/store"
DEFAULT_WRAPPER_MARKER = "makeCWrapper"
# 1 MiB
DEFAULT_MAX_DETECT_SIZE = 1_048_576

CONFIG_SECTION = "resolver"


@dataclass(frozen=True)
class ResolverSettings:
    store_dir: str = DEFAULT_STORE_DIR
    wrapper_marker: str = DEFAULT_WRAPPER_MARKER
    max_detect_size: int = DEFAULT_MAX_DETECT_SIZE

    def __post_init__(self):
        # "/nix/store/" and "/nix/store" name the same store
        if len(self.store_dir) > 1 and self.store_dir.endswith("/"):
            object.__setattr__(self, "store_dir", self.store_dir.rstrip("/"))


def load_settings(config_manager: Optional[ConfigManager] = None) -> ResolverSettings:
    """Build ResolverSettings from the ``[resolver]`` table of the config file.

    Options missing from the file keep their defaults.

    Raises:
        InvalidInputError: if an option has a value of the wrong type.
    """
    if config_manager is None:
        config_manager = ConfigManager()
    options = config_manager.section(CONFIG_SECTION)
    if not isinstance(options, dict):
        raise InvalidInputError(f"'{CONFIG_SECTION}' in the config file must be a table")

    settings = ResolverSettings(
        store_dir=_get_str(options, "store_dir", DEFAULT_STORE_DIR),
        wrapper_marker=_get_str(options, "wrapper_marker", DEFAULT_WRAPPER_MARKER),
        max_detect_size=_get_size(options, "max_detect_size", DEFAULT_MAX_DETECT_SIZE),
    )
    logger.debug(f"Resolver settings: {settings}")
    return settings


def _get_str(options: Dict[str, Any], option: str, default: str) -> str:
    value = options.get(option, default)
    if not isinstance(value, str) or not value:
        raise InvalidInputError(
            f"{CONFIG_SECTION}.{option} must be a non-empty string, got {value!r}"
        )
    return value


def _get_size(options: Dict[str, Any], option: str, default: int) -> int:
    value = options.get(option, default)
    # bool is an int subclass, but "true" is not a size
    if isinstance(value, bool):
        raise InvalidInputError(f"{CONFIG_SECTION}.{option} must be an integer, got {value!r}")
    try:
        size = int(value)
    except (TypeError, ValueError) as err:
        raise InvalidInputError(
            f"{CONFIG_SECTION}.{option} must be an integer, got {value!r}"
        ) from err
    if size < 0:
        raise InvalidInputError(f"{CONFIG_SECTION}.{option} must not be negative, got {size}")
    return size
