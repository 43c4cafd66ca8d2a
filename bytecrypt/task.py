"""A unit of work: one file and whether to encrypt or decrypt it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO

from .fileio import open_file


class Action(enum.Enum):
    """What to do with a file."""

    ENCRYPT = "ENCRYPT"
    DECRYPT = "DECRYPT"


class TaskFormatError(ValueError):
    """Raised when serialised task data cannot be parsed."""


@dataclass
class Task:
    """An open file together with the action to apply to it."""

    filepath: str
    stream: BinaryIO
    action: Action

    def to_string(self) -> str:
        """Serialise as ``"<filepath>,<ACTION>"``."""
        return f"{self.filepath},{self.action.value}"

    @classmethod
    def from_string(cls, task_data: str) -> "Task":
        """Parse serialised task data and open the file it names.

        Any action word other than ``ENCRYPT`` means decryption. Raises
        ``TaskFormatError`` for malformed data and ``OSError`` if the file
        cannot be opened.
        """
        filepath, sep, rest = task_data.partition(",")
        if not sep or not rest:
            raise TaskFormatError(f"INVALID TASK DATA FORMAT: {task_data!r}")
        action_word = rest.partition(",")[0]
        action = Action.ENCRYPT if action_word == "ENCRYPT" else Action.DECRYPT
        try:
            stream = open_file(filepath)
        except OSError as exc:
            raise OSError(f"FAILED TO OPEN FILE: {filepath}") from exc
        return cls(filepath=filepath, stream=stream, action=action)

    def close(self) -> None:
        """Close the file stream."""
        self.stream.close()

    def __enter__(self) -> "Task":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()