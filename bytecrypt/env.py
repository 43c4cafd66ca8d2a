"""Reading the key from an environment file."""

from __future__ import annotations

import os
import re

from .fileio import open_file

DEFAULT_ENV_PATH = ".env"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_env(env_path: str | os.PathLike[str] = DEFAULT_ENV_PATH) -> str:
    """Return the whole content of the environment file."""
    with open_file(env_path) as stream:
        return stream.read().decode("utf-8", errors="replace")


def read_key(env_path: str | os.PathLike[str] = DEFAULT_ENV_PATH) -> int:
    """Return the integer key at the start of the environment file.

    Leading whitespace and an optional sign are accepted; anything after
    the digits is ignored. Raises ``ValueError`` if no integer is found.
    """
    content = read_env(env_path)
    match = _LEADING_INT.match(content)
    if match is None:
        raise ValueError(f"no integer key found in {os.fspath(env_path)!r}")
    return int(match.group(1))