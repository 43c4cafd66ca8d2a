"""Interactive command that encrypts or decrypts every file in a directory."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .env import DEFAULT_ENV_PATH
from .fileio import open_file
from .process_management import ProcessManagement
from .task import Action, Task


def parse_action(text: str) -> Action:
    """``"encrypt"`` means encryption; anything else means decryption."""
    return Action.ENCRYPT if text == "encrypt" else Action.DECRYPT


def collect_tasks(directory: str | os.PathLike[str], action: Action) -> list[Task]:
    """Open every regular file below ``directory``, recursively, as a task.

    Files that cannot be opened are reported and skipped.
    """
    tasks: list[Task] = []
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            file_path = os.path.join(root, name)
            if not os.path.isfile(file_path):
                continue
            try:
                stream = open_file(file_path)
            except OSError:
                print(f"Unable to open file: {file_path}")
                continue
            tasks.append(Task(filepath=file_path, stream=stream, action=action))
    return tasks


def run(
    directory: str | os.PathLike[str],
    action: Action,
    env_path: str | os.PathLike[str] = DEFAULT_ENV_PATH,
) -> int:
    """Apply ``action`` to every file below ``directory``; return the count.

    Raises ``NotADirectoryError`` if ``directory`` is not an existing directory.
    """
    if not os.path.isdir(directory):
        raise NotADirectoryError(os.fspath(directory))
    manager = ProcessManagement(env_path)
    for task in collect_tasks(directory, action):
        manager.submit_to_queue(task)
    return manager.execute_tasks()


def _prompt(message: str) -> str:
    try:
        return input(message)
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Prompt for a directory and an action, then process the files."""
    directory = _prompt("Enter the directory path: ")
    action = _prompt("Enter the action (encrypt/decrypt): ")
    try:
        run(directory, parse_action(action))
    except NotADirectoryError:
        print("Invalid directory path!")
    except OSError as exc:
        print(f"Filesystem error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())