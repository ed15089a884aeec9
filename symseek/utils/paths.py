# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import pathlib


def clean_path(path: str) -> str:
    """Normalize a path to a POSIX path, with '..' path components removing the previous directory.
    This is similar to os.path.normpath, but it also removes leading '..' path components for relative
    paths, and a '..' directly under the root stays at the root. Note that symlinks are not followed,
    so in some cases the result may not be a valid path on the local filesystem. For example,
    clean_path("/a/b/../c") == "/a/c", but if "/a/b" is a symlink to "/x/y", then "/a/c" is not where
    the OS would end up. The result is returned as a string for display and comparison."""
    posix_path = pathlib.PurePosixPath(path)

    # Remove '..' path component and preceding path component
    # PurePosixPath.parts is a tuple, so we can't modify it in-place
    parts = list(posix_path.parts)
    i = 0
    while i < len(parts):
        if parts[i] == "..":
            del parts[i]
            if i > 0:
                if i > 1 or parts[0] not in ("//", "/"):
                    del parts[i - 1]
                    i -= 1
        else:
            i += 1
    return pathlib.PurePosixPath(*parts).as_posix()


def resolve_link_target(link_path: str, target: str) -> str:
    """Return where the symlink at ``link_path`` points, given its raw ``target``.

    Absolute targets are returned verbatim; relative ones are joined to the link's
    parent directory and cleaned with clean_path().
    """
    if pathlib.PurePosixPath(target).is_absolute():
        return target
    parent = pathlib.PurePosixPath(link_path).parent
    return clean_path(str(parent / target))
