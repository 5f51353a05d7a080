"""
Translation between wire schemas and domain Task values.

Validation lives here too: validate_title raises ValueError for a blank
title, which the API turns into a 400. Handlers call it before mapping, so
the task_from_* builders assume an already validated payload.
"""
import uuid

from .models import Task, current_millis
from .schemas import TaskIn, TaskUpdateIn, TaskOut


def new_task_id() -> str:
    return str(uuid.uuid4())


def validate_title(title: str) -> str:
    if not title or not title.strip():
        raise ValueError("Title must not be blank")
    return title


def task_from_create(payload: TaskIn) -> Task:
    """Build a brand new Task with a generated id and the current time."""
    return Task(
        id=new_task_id(),
        title=payload.title,
        description=payload.description,
        is_completed=payload.is_completed,
        created_at=current_millis(),
    )


def task_from_update(payload: TaskUpdateIn, task_id: str, created_at: int) -> Task:
    """
    Build the replacement for an existing task.

    created_at must come from the stored record; updates never mint a new
    creation time. Title, description and completion are replaced wholesale.
    """
    return Task(
        id=task_id,
        title=payload.title,
        description=payload.description,
        is_completed=payload.is_completed,
        created_at=created_at,
    )


def to_task_out(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        title=task.title,
        description=task.description,
        is_completed=task.is_completed,
        created_at=task.created_at,
    )
