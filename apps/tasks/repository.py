"""
TaskRepository - storage-agnostic interface over task storage.

Use cases only ever talk to this interface. The concrete backend is chosen
by the TASKS_REPOSITORY_BACKEND setting:

    TASKS_REPOSITORY_BACKEND=memory   # InMemoryTaskRepository over TaskStore

A durable backend must keep the same five signatures and the same
guarantees as TaskStore: atomic operations, update only when the id
exists, delete reports whether something was removed.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Task
from .store import TaskStore


class TaskRepository(ABC):
    """
    Abstract interface for task storage.

    Implementations:
    - InMemoryTaskRepository: process-local TaskStore
    """

    @abstractmethod
    def get_all_tasks(self) -> List[Task]:
        pass

    @abstractmethod
    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    def create_task(self, task: Task) -> Task:
        """
        Store a new task.

        Args:
            task: Task carrying a freshly generated id

        Returns:
            The stored task
        """
        pass

    @abstractmethod
    def update_task(self, task: Task) -> Optional[Task]:
        """
        Replace an existing task.

        Returns:
            The stored task, or None if no task has task.id
        """
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        """Returns True if a task was removed."""
        pass


class InMemoryTaskRepository(TaskRepository):
    """Forwards every call to a TaskStore."""

    def __init__(self, store: TaskStore):
        self._store = store

    def get_all_tasks(self) -> List[Task]:
        return self._store.list()

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self._store.get(task_id)

    def create_task(self, task: Task) -> Task:
        return self._store.insert(task)

    def update_task(self, task: Task) -> Optional[Task]:
        return self._store.update(task)

    def delete_task(self, task_id: str) -> bool:
        return self._store.delete(task_id)
