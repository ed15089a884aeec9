# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScriptKind(Enum):
    SHELL = "shell"
    # Python and Perl wrappers are not detected yet
    PYTHON = "python"
    PERL = "perl"
    UNKNOWN = "unknown"


class WrapperKind(Enum):
    """A binary wrapper, or a text wrapper tagged with its script language."""

    BINARY = "binary"
    SHELL_SCRIPT = "shell_script"
    PYTHON_SCRIPT = "python_script"
    PERL_SCRIPT = "perl_script"
    UNKNOWN_SCRIPT = "unknown_script"

    @classmethod
    def text(cls, script_kind: ScriptKind) -> WrapperKind:
        return _TEXT_WRAPPERS[script_kind]

    @property
    def is_text(self) -> bool:
        return self is not WrapperKind.BINARY

    @property
    def script_kind(self) -> Optional[ScriptKind]:
        for script_kind, wrapper_kind in _TEXT_WRAPPERS.items():
            if wrapper_kind is self:
                return script_kind
        return None


_TEXT_WRAPPERS = {
    ScriptKind.SHELL: WrapperKind.SHELL_SCRIPT,
    ScriptKind.PYTHON: WrapperKind.PYTHON_SCRIPT,
    ScriptKind.PERL: WrapperKind.PERL_SCRIPT,
    ScriptKind.UNKNOWN: WrapperKind.UNKNOWN_SCRIPT,
}


class FileKind(Enum):
    BINARY = "binary"
    TEXT = "text"


class LinkCategory(Enum):
    SYMLINK = "symlink"
    WRAPPER = "wrapper"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class LinkKind:
    """How a hop leads to the next one.

    Only WRAPPER hops carry a ``wrapper_kind`` and only TERMINAL hops carry a
    ``file_kind``; use the ``symlink``/``wrapper``/``terminal`` constructors
    rather than building one directly.
    """

    category: LinkCategory
    wrapper_kind: Optional[WrapperKind] = None
    file_kind: Optional[FileKind] = None

    def __post_init__(self):
        if (self.wrapper_kind is not None) != (self.category is LinkCategory.WRAPPER):
            raise ValueError(f"wrapper_kind is only valid for wrapper links, got {self!r}")
        if (self.file_kind is not None) != (self.category is LinkCategory.TERMINAL):
            raise ValueError(f"file_kind is only valid for terminal links, got {self!r}")

    @classmethod
    def symlink(cls) -> LinkKind:
        return cls(LinkCategory.SYMLINK)

    @classmethod
    def wrapper(cls, kind: WrapperKind) -> LinkKind:
        return cls(LinkCategory.WRAPPER, wrapper_kind=kind)

    @classmethod
    def terminal(cls, kind: FileKind) -> LinkKind:
        return cls(LinkCategory.TERMINAL, file_kind=kind)
