# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from symseek.utils.strings import extract_printable


def test_nul_terminated_runs():
    assert extract_printable(b"Hello\0World\0") == "Hello\nWorld\n"
    assert extract_printable(b"first\0second\0third\0") == "first\nsecond\nthird\n"


def test_store_path_in_binary():
    data = b"\x00\x01\x02/nix/store/abc123-pkg/bin/exe\0more data\0"
    result = extract_printable(data)
    assert "/nix/store/abc123-pkg/bin/exe\n" in result
    assert "more data\n" in result


def test_empty_and_unprintable():
    assert extract_printable(b"") == ""
    assert extract_printable(bytes([0x01, 0x02, 0x03, 0x04, 0xFF, 0xFE])) == ""
    assert extract_printable(b"\0\0\0") == ""


def test_non_printable_byte_breaks_run():
    assert extract_printable(b"junk\x01kept\0") == "kept\n"
    assert extract_printable(b"line one\nline two\0") == "line two\n"


def test_unterminated_run_is_dropped():
    assert extract_printable(b"done\0pending") == "done\n"


def test_printable_range_bounds():
    assert extract_printable(b" ~\0") == " ~\n"
    assert extract_printable(b"a\x7fb\0") == "b\n"
    assert extract_printable(b"a\x1fb\0") == "b\n"
