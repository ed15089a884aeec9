# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import stat
from enum import Enum, auto
from typing import Optional

from loguru import logger

from symseek.errors import FileIoError

ELF_MAGIC = b"\x7fELF"
SHEBANG_PREFIX = b"#!"
# Only this much of a file is looked at to classify it
SNIFF_SIZE = 512


class FileType(Enum):
    SYMLINK = auto()
    SHELL_SCRIPT = auto()
    PYTHON_SCRIPT = auto()
    PERL_SCRIPT = auto()
    OTHER_SCRIPT = auto()
    ELF_BINARY = auto()
    OTHER_BINARY = auto()
    OTHER_TEXT = auto()


def classify(path: str) -> FileType:
    """Sniff what kind of file ``path`` is.

    Symlinks are reported as such without being followed or read. For anything else
    only the first 512 bytes are examined: ELF magic, then a shebang line, then
    whether the bytes are valid UTF-8.

    Raises:
        FileIoError: if the metadata or the content of ``path`` cannot be read.
    """
    logger.trace(f"classify called for: {path}")
    try:
        st = os.lstat(path)
    except OSError as err:
        raise FileIoError(f"Failed to read metadata for {path}", path, str(err)) from err

    if stat.S_ISLNK(st.st_mode):
        logger.trace(f"Detected as symlink: {path}")
        return FileType.SYMLINK

    try:
        with open(path, "rb") as f:
            buffer = f.read(SNIFF_SIZE)
    except OSError as err:
        raise FileIoError(f"Failed to read {path}", path, str(err)) from err
    logger.trace(f"Read {len(buffer)} bytes from {path}")

    file_type = classify_bytes(buffer)
    logger.trace(f"Detected as {file_type.name}: {path}")
    return file_type


def classify_bytes(buffer: bytes) -> FileType:
    """Classify the leading bytes of a regular file."""
    if buffer[: len(ELF_MAGIC)] == ELF_MAGIC:
        return FileType.ELF_BINARY

    if buffer.startswith(SHEBANG_PREFIX):
        shebang_type = _classify_shebang(buffer)
        if shebang_type is not None:
            return shebang_type

    if _is_utf8(buffer):
        return FileType.OTHER_TEXT
    return FileType.OTHER_BINARY


def _classify_shebang(buffer: bytes) -> Optional[FileType]:
    line_end = buffer.find(b"\n")
    if line_end == -1:
        line_end = len(buffer)
    try:
        shebang = buffer[len(SHEBANG_PREFIX) : line_end].decode("utf-8")
    except UnicodeDecodeError:
        return None
    logger.debug(f"Shebang: {shebang.strip()}")

    # "sh" also covers bash, zsh, dash, ...
    interpreter = shebang.lower()
    if "bash" in interpreter or "sh" in interpreter:
        return FileType.SHELL_SCRIPT
    if "python" in interpreter:
        return FileType.PYTHON_SCRIPT
    if "perl" in interpreter:
        return FileType.PERL_SCRIPT
    return FileType.OTHER_SCRIPT


def _is_utf8(buffer: bytes) -> bool:
    try:
        buffer.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True
