"""Byte-shift encryption and decryption of files in place."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Sequence

from .env import DEFAULT_ENV_PATH, read_key
from .task import Action, Task

_CHUNK_SIZE = 64 * 1024


def _shift_table(shift: int) -> bytes:
    return bytes((value + shift) % 256 for value in range(256))


def encrypt_bytes(data: bytes, key: int) -> bytes:
    """Add ``key`` to every byte, modulo 256."""
    return bytes(data).translate(_shift_table(key))


def decrypt_bytes(data: bytes, key: int) -> bytes:
    """Subtract ``key`` from every byte, modulo 256."""
    return bytes(data).translate(_shift_table(-key))


def transform_stream(stream: BinaryIO, action: Action, key: int) -> int:
    """Encrypt or decrypt a seekable stream in place from its current position.

    Returns the number of bytes transformed.
    """
    table = _shift_table(key if action is Action.ENCRYPT else -key)
    total = 0
    while True:
        position = stream.tell()
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        stream.seek(position)
        stream.write(chunk.translate(table))
        total += len(chunk)
    stream.flush()
    return total


def execute_cryption(
    task_data: str, env_path: str | os.PathLike[str] = DEFAULT_ENV_PATH
) -> int:
    """Run a serialised task, reading the key from ``env_path``.

    Returns the number of bytes transformed.
    """
    with Task.from_string(task_data) as task:
        key = read_key(env_path)
        return transform_stream(task.stream, task.action, key)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``cryption <filepath,ACTION>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: cryption <task_data>", file=sys.stderr)
        return 1
    execute_cryption(args[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())