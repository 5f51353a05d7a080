"""
TaskStore - in-memory, thread-safe container of Task records.

Every key hashes to one of a fixed set of stripe locks, so operations on
the same id are serialized and each operation is atomic. Operations on
different ids only wait for each other when their ids share a stripe; raise
TASKS_STORE_LOCK_STRIPES to make that rarer. list() holds every stripe
(always acquired in index order) to take a consistent snapshot, so it
briefly blocks all writers.
"""
import logging
import threading
from contextlib import ExitStack
from typing import Dict, List, Optional

from .models import Task

logger = logging.getLogger(__name__)

DEFAULT_LOCK_STRIPES = 16


class TaskStore:
    """Sole owner of the canonical Task records."""

    def __init__(self, stripes: int = DEFAULT_LOCK_STRIPES):
        if stripes < 1:
            raise ValueError(f"TaskStore needs at least one lock stripe, got {stripes}")
        self._tasks: Dict[str, Task] = {}
        self._locks = [threading.Lock() for _ in range(stripes)]
        logger.debug(f"TaskStore ready with {stripes} lock stripes")

    def _lock_for(self, task_id: str) -> threading.Lock:
        return self._locks[hash(task_id) % len(self._locks)]

    def list(self) -> List[Task]:
        """Snapshot of all tasks. Order is not guaranteed."""
        with ExitStack() as stack:
            for lock in self._locks:
                stack.enter_context(lock)
            return list(self._tasks.values())

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock_for(task_id):
            return self._tasks.get(task_id)

    def insert(self, task: Task) -> Task:
        """Store task at task.id, overwriting anything already there."""
        with self._lock_for(task.id):
            self._tasks[task.id] = task
            return task

    def update(self, task: Task) -> Optional[Task]:
        """Replace the record at task.id. Returns None if no record exists."""
        with self._lock_for(task.id):
            if task.id not in self._tasks:
                return None
            self._tasks[task.id] = task
            return task

    def delete(self, task_id: str) -> bool:
        with self._lock_for(task_id):
            return self._tasks.pop(task_id, None) is not None
