# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

PRINTABLE_ASCII_MIN = 32
PRINTABLE_ASCII_MAX = 126


def extract_printable(data: bytes) -> str:
    """
    Pull the NUL-terminated runs of printable ASCII out of raw bytes, one run per line.

    Only runs ended by a NUL byte are kept; any other non-printable byte throws away
    the run collected so far. Used to give the wrapper detectors a text view of
    binary files.

    Args:
        data (bytes): Raw file content.

    Returns:
        str: The extracted runs, each followed by a newline.
    """
    runs = []
    start = None
    for i, byte in enumerate(data):
        if PRINTABLE_ASCII_MIN <= byte <= PRINTABLE_ASCII_MAX:
            if start is None:
                start = i
        elif byte == 0:
            if start is not None:
                runs.append(data[start:i].decode("ascii"))
                runs.append("\n")
            start = None
        else:
            start = None
    return "".join(runs)
