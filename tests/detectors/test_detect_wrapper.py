# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import pytest

from symseek.chaintypes import LinkKind, WrapperKind
from symseek.config import ResolverSettings
from symseek.detectors import (
    DETECTOR_ORDER,
    WrapperDetector,
    detect_wrapper,
    normalize_program_name,
    programs_match,
)
from symseek.filetypeid import FileType


def test_normalize_program_name():
    assert normalize_program_name("nvim") == "nvim"
    assert normalize_program_name("nvim-wrapped") == "nvim"
    assert normalize_program_name(".nvim-unwrapped") == "nvim"
    assert normalize_program_name(".nvim-wrapped") == "nvim"
    assert normalize_program_name("python-unwrapped") == "python"
    assert normalize_program_name(".hidden") == "hidden"
    assert normalize_program_name("") == ""
    # only one suffix and one dot are removed
    assert normalize_program_name("..gcc") == ".gcc"
    assert normalize_program_name("gcc-unwrapped-wrapped") == "gcc-unwrapped"


def test_programs_match():
    assert programs_match("/usr/bin/nvim", "/nix/store/xxx/bin/nvim")
    assert programs_match("/usr/bin/nvim-wrapped", "/nix/store/xxx/bin/nvim-unwrapped")
    assert programs_match("/usr/bin/.nvim-wrapped", "/usr/bin/nvim")
    assert not programs_match("/usr/bin/nvim", "/usr/bin/vim")
    assert not programs_match("/", "/")


def test_detector_order():
    assert DETECTOR_ORDER == (WrapperDetector.MARKER, WrapperDetector.PROGRAM_NAME)


@pytest.fixture(name="store")
def fixture_store(tmp_path):
    store = tmp_path / "nix" / "store"
    named = store / "bbb222-tool" / "bin" / "tool"
    named.parent.mkdir(parents=True)
    named.write_bytes(b"\x7fELF")
    return store


def test_marker_detector_takes_precedence(tmp_path, store):
    marker_target = f"{store}/aaa111-tool-builder/bin/tool-real"
    named = store / "bbb222-tool" / "bin" / "tool"
    wrapper = tmp_path / "tool"
    wrapper.write_text(f"#!/bin/bash\nexec {named}\nmakeCWrapper '{marker_target}'\n")
    settings = ResolverSettings(store_dir=str(store))

    target, link_kind = detect_wrapper(str(wrapper), FileType.SHELL_SCRIPT, settings)
    assert target == marker_target
    assert link_kind == LinkKind.wrapper(WrapperKind.SHELL_SCRIPT)


def test_falls_back_to_program_name(tmp_path, store):
    named = store / "bbb222-tool" / "bin" / "tool"
    wrapper = tmp_path / "tool"
    wrapper.write_bytes(b"\x7fELF\xff\x00" + str(named).encode() + b"\x00")
    settings = ResolverSettings(store_dir=str(store))

    target, link_kind = detect_wrapper(str(wrapper), FileType.ELF_BINARY, settings)
    assert target == str(named)
    assert link_kind == LinkKind.wrapper(WrapperKind.BINARY)


@pytest.mark.parametrize(
    "file_type",
    [
        FileType.PYTHON_SCRIPT,
        FileType.PERL_SCRIPT,
        FileType.OTHER_SCRIPT,
        FileType.OTHER_TEXT,
        FileType.OTHER_BINARY,
    ],
)
def test_other_types_are_not_inspected(tmp_path, store, file_type):
    named = store / "bbb222-tool" / "bin" / "tool"
    wrapper = tmp_path / "tool"
    wrapper.write_text(f"makeCWrapper '{named}'\n")
    settings = ResolverSettings(store_dir=str(store))
    assert detect_wrapper(str(wrapper), file_type, settings) is None


def test_no_match(tmp_path):
    script = tmp_path / "script"
    script.write_text("#!/bin/bash\necho hello\n")
    assert detect_wrapper(str(script), FileType.SHELL_SCRIPT, ResolverSettings()) is None
