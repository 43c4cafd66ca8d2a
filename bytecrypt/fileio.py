"""Opening files for in-place binary reading and writing."""

from __future__ import annotations

import os
from typing import BinaryIO


def open_file(file_path: str | os.PathLike[str]) -> BinaryIO:
    """Open an existing file for binary reading and writing.

    The file is neither created nor truncated. Raises ``OSError`` if it
    cannot be opened.
    """
    return open(file_path, "r+b")