"""
Composition root for the tasks app.

Builds Store -> Repository -> Use Cases once, at process start, and hands
the result to the API. Backend selection follows TASKS_REPOSITORY_BACKEND.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from .repository import InMemoryTaskRepository, TaskRepository
from .store import DEFAULT_LOCK_STRIPES, TaskStore
from .use_cases import TaskUseCases

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskContainer:
    store: Optional[TaskStore]
    repository: TaskRepository
    use_cases: TaskUseCases


def build_task_container(
    backend: Optional[str] = None,
    stripes: Optional[int] = None,
) -> TaskContainer:
    """
    Wire up the task layers.

    Args:
        backend: Repository backend name (defaults to TASKS_REPOSITORY_BACKEND)
        stripes: Lock stripes for the in-memory store (defaults to TASKS_STORE_LOCK_STRIPES)
    """
    if backend is None:
        backend = getattr(settings, 'TASKS_REPOSITORY_BACKEND', 'memory')

    if backend == 'memory':
        if stripes is None:
            stripes = getattr(settings, 'TASKS_STORE_LOCK_STRIPES', DEFAULT_LOCK_STRIPES)
        store = TaskStore(stripes=stripes)
        repository = InMemoryTaskRepository(store)
    else:
        raise ValueError(f"Unknown TASKS_REPOSITORY_BACKEND: {backend}")

    logger.info(f"Task container built with {backend} backend")
    return TaskContainer(
        store=store,
        repository=repository,
        use_cases=TaskUseCases.from_repository(repository),
    )
