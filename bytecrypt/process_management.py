"""A queue of tasks that are run one after another."""

from __future__ import annotations

import os
from collections import deque

from .cryption import execute_cryption
from .env import DEFAULT_ENV_PATH
from .task import Task


class ProcessManagement:
    """Holds submitted tasks and executes them in submission order."""

    def __init__(self, env_path: str | os.PathLike[str] = DEFAULT_ENV_PATH) -> None:
        self.env_path = env_path
        self._queue: deque[Task] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def submit_to_queue(self, task: Task) -> bool:
        """Take ownership of a task and queue it."""
        self._queue.append(task)
        return True

    def execute_tasks(self) -> int:
        """Run and drain every queued task; return how many were run."""
        executed = 0
        while self._queue:
            task = self._queue.popleft()
            task.close()
            serialised = task.to_string()
            print(f"Executing task: {serialised}")
            execute_cryption(serialised, self.env_path)
            executed += 1
        return executed