"""
Task use cases.

Each use case wraps exactly one repository call. They are the single entry
point from the API into storage, so business rules (auditing, ownership
checks) attach here without touching routes or storage. No HTTP semantics:
absence is reported as None/False and left to the caller.
"""
from dataclasses import dataclass
from typing import List, Optional

from .models import Task
from .repository import TaskRepository


class GetAllTasksUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def __call__(self) -> List[Task]:
        return self.repository.get_all_tasks()


class GetTaskByIdUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def __call__(self, task_id: str) -> Optional[Task]:
        return self.repository.get_task_by_id(task_id)


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def __call__(self, task: Task) -> Task:
        return self.repository.create_task(task)


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def __call__(self, task: Task) -> Optional[Task]:
        return self.repository.update_task(task)


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def __call__(self, task_id: str) -> bool:
        return self.repository.delete_task(task_id)


@dataclass(frozen=True)
class TaskUseCases:
    """The five task operations handed to the API layer."""
    get_all_tasks: GetAllTasksUseCase
    get_task_by_id: GetTaskByIdUseCase
    create_task: CreateTaskUseCase
    update_task: UpdateTaskUseCase
    delete_task: DeleteTaskUseCase

    @classmethod
    def from_repository(cls, repository: TaskRepository) -> "TaskUseCases":
        return cls(
            get_all_tasks=GetAllTasksUseCase(repository),
            get_task_by_id=GetTaskByIdUseCase(repository),
            create_task=CreateTaskUseCase(repository),
            update_task=UpdateTaskUseCase(repository),
            delete_task=DeleteTaskUseCase(repository),
        )
