# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import platform
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional, Union

import tomlkit


class ConfigManager:
    """Per-application singleton over the symseek TOML configuration file.

    The file is parsed once when the instance is created, so edits made by other
    processes while symseek runs are not picked up. Values written with set() are
    saved immediately and keep any comments and formatting already in the file.

    Attributes:
        app_name (str): Name of the application owning the file. (Default: 'symseek')
        config_dir (Optional[Path]): Directory override, mostly useful for tests.
        config (tomlkit.TOMLDocument): The parsed configuration document.
        config_file_path (Path): Location of the configuration file.
    """

    _initialized: bool = False
    _instances: Dict[str, "ConfigManager"] = {}
    _lock = Lock()

    def __new__(
        cls, app_name: str = "symseek", config_dir: Optional[Union[str, Path]] = None
    ) -> "ConfigManager":
        """Return the one ConfigManager for ``app_name``, creating it on first use.

        Args:
            app_name (str): Name of the application. (Default: 'symseek')
            config_dir (Optional[Union[str, Path]]): Directory holding the per-application
                config directory; only honoured when the instance is first created.

        Returns:
            ConfigManager: The shared instance for ``app_name``.
        """
        with cls._lock:
            if app_name not in cls._instances:
                instance = super(ConfigManager, cls).__new__(cls)
                instance._initialized = False
                cls._instances[app_name] = instance
            return cls._instances[app_name]

    def __init__(
        self, app_name: str = "symseek", config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """Locate and load the configuration file; later calls are no-ops.

        Args:
            app_name (str): Name of the application. (Default: 'symseek')
            config_dir (Optional[Union[str, Path]]): Directory holding the per-application
                config directory. Defaults to XDG_CONFIG_HOME (APPDATA on Windows).
        """
        if self._initialized:
            return
        self._initialized = True

        self.app_name = app_name
        self.config_dir = Path(config_dir) / app_name if config_dir else None
        self.config = tomlkit.document()
        self.config_file_path = self._get_config_file_path()
        self._load_config()

    def _get_config_file_path(self) -> Path:
        """Work out where ``config.toml`` lives.

        Returns:
            Path: ``<config_dir>/config.toml`` when a directory was given, otherwise
            ``$XDG_CONFIG_HOME/<app_name>/config.toml`` (``%APPDATA%`` on Windows).
        """
        if self.config_dir:
            return (self.config_dir / "config.toml").expanduser()
        if platform.system() == "Windows":
            base_dir = Path(os.getenv("APPDATA", str(Path("~\\AppData\\Roaming"))))
        else:
            base_dir = Path(os.getenv("XDG_CONFIG_HOME", str(Path("~/.config"))))
        return (base_dir / self.app_name / "config.toml").expanduser()

    def _load_config(self) -> None:
        """Parse the configuration file, if there is one."""
        if self.config_file_path.exists():
            with open(self.config_file_path, "r") as configfile:
                self.config = tomlkit.parse(configfile.read())

    def get(self, section: str, option: str, fallback: Optional[Any] = None) -> Any:
        """Get a single option.

        Args:
            section (str): Table in the configuration file, e.g. 'resolver'.
            option (str): Key within the table, e.g. 'store_dir'.
            fallback (Optional[Any]): Returned when the table or key is missing.

        Returns:
            Any: The configured value, or ``fallback``.
        """
        return self.config.get(section, {}).get(option, fallback)

    def section(self, section: str) -> Dict[str, Any]:
        """Get a whole table as plain Python values.

        Args:
            section (str): Table in the configuration file, e.g. 'resolver'.

        Returns:
            Dict[str, Any]: The table's options, empty when the table is missing.
        """
        table = self.config.get(section)
        if table is None:
            return {}
        return table.unwrap()

    def set(self, section: str, option: str, value: Any) -> None:
        """Set an option and write the file back out.

        Args:
            section (str): Table in the configuration file; created if missing.
            option (str): Key within the table.
            value (Any): The value to store.
        """
        if section not in self.config:
            self.config[section] = tomlkit.table()
        self.config[section][option] = value
        self._save_config()

    def _save_config(self) -> None:
        """Write the document to the configuration file, creating its directory."""
        self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file_path, "w") as configfile:
            configfile.write(tomlkit.dumps(self.config))

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to a whole table.
        NOTE: check the result for 'None' before indexing into it.

        Args:
            key (str): Name of a TOML table or top-level value.

        Returns:
            Any: The table or value, or 'None' if the key doesn't exist.
        """
        if key not in self.config:
            return None
        return self.config[key]

    @classmethod
    def delete_instance(cls, app_name: str) -> None:
        """Forget the instance for ``app_name`` so the next use re-reads the file.

        Args:
            app_name (str): Name of the application.
        """
        with cls._lock:
            if app_name in cls._instances:
                del cls._instances[app_name]
