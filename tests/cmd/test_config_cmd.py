# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import pytest
from click.testing import CliRunner

from symseek.cmd.config import config
from symseek.cmd.trace import trace
from symseek.config import load_settings
from symseek.configmanager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    ConfigManager.delete_instance("symseek")
    yield
    ConfigManager.delete_instance("symseek")


def test_set_then_get():
    runner = CliRunner()
    result = runner.invoke(config, ["resolver.store_dir", "/gnu/store"])
    assert result.exit_code == 0
    assert "Configuration 'resolver.store_dir' set to '/gnu/store'." in result.output

    result = runner.invoke(config, ["resolver.store_dir"])
    assert result.exit_code == 0
    assert result.output == "resolver.store_dir = /gnu/store\n"


def test_values_are_converted():
    CliRunner().invoke(config, ["resolver.max_detect_size", "4096"])
    settings = load_settings()
    assert settings.max_detect_size == 4096
    assert settings.store_dir == "/nix/store"


def test_missing_key():
    result = CliRunner().invoke(config, ["resolver.wrapper_marker"])
    assert result.exit_code == 0
    assert "Configuration 'resolver.wrapper_marker' not found." in result.output


def test_bad_key():
    result = CliRunner().invoke(config, ["store_dir"])
    assert result.exit_code != 0
    assert "section.option" in result.output


def test_bad_config_value_is_reported_by_trace(tmp_path):
    runner = CliRunner()
    runner.invoke(config, ["resolver.max_detect_size", "lots"])

    result = runner.invoke(trace, [str(tmp_path)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "resolver.max_detect_size" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
