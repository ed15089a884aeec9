# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import dataclasses

import pytest

from symseek.chaintypes import (
    ChainHop,
    FileKind,
    LinkCategory,
    LinkKind,
    ResolutionChain,
    ScriptKind,
    WrapperKind,
)


def test_text_wrapper_kinds():
    assert WrapperKind.text(ScriptKind.SHELL) is WrapperKind.SHELL_SCRIPT
    assert WrapperKind.text(ScriptKind.UNKNOWN) is WrapperKind.UNKNOWN_SCRIPT
    assert WrapperKind.PERL_SCRIPT.script_kind is ScriptKind.PERL
    assert WrapperKind.BINARY.script_kind is None
    assert WrapperKind.SHELL_SCRIPT.is_text
    assert not WrapperKind.BINARY.is_text


def test_link_kind_constructors():
    assert LinkKind.symlink().category is LinkCategory.SYMLINK
    wrapper = LinkKind.wrapper(WrapperKind.BINARY)
    assert (wrapper.category, wrapper.wrapper_kind, wrapper.file_kind) == (
        LinkCategory.WRAPPER,
        WrapperKind.BINARY,
        None,
    )
    terminal = LinkKind.terminal(FileKind.TEXT)
    assert (terminal.category, terminal.wrapper_kind, terminal.file_kind) == (
        LinkCategory.TERMINAL,
        None,
        FileKind.TEXT,
    )


def test_link_kind_rejects_mismatched_payload():
    with pytest.raises(ValueError):
        LinkKind(LinkCategory.SYMLINK, wrapper_kind=WrapperKind.BINARY)
    with pytest.raises(ValueError):
        LinkKind(LinkCategory.WRAPPER)
    with pytest.raises(ValueError):
        LinkKind(LinkCategory.TERMINAL, wrapper_kind=WrapperKind.BINARY, file_kind=FileKind.TEXT)


def test_chain_is_immutable():
    hop = ChainHop("/bin/a", True, LinkKind.terminal(FileKind.TEXT))
    chain = ResolutionChain(origin="/bin/a", hops=(hop,))
    with pytest.raises(dataclasses.FrozenInstanceError):
        chain.origin = "/bin/b"
    with pytest.raises(dataclasses.FrozenInstanceError):
        hop.is_final = False
    assert hop.metadata is None


def test_final_hop():
    assert ResolutionChain(origin="/bin/a").final_hop is None
    assert ResolutionChain(origin="/bin/a").is_empty()
    pending = ChainHop("/bin/b", False, LinkKind.symlink())
    assert ResolutionChain(origin="/bin/a", hops=(pending,)).final_hop is None
