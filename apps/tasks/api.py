"""
Tasks API endpoints.

Provides CRUD operations for tasks under /api/tasks. The handlers own every
HTTP decision: status codes, error bodies, and the existence check that
precedes an update. Use cases are passed in by the composition root.
"""
import logging
from typing import List

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from .mappers import task_from_create, task_from_update, to_task_out, validate_title
from .schemas import TaskIn, TaskUpdateIn, TaskOut, MessageOut, ErrorOut
from .use_cases import TaskUseCases

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


# =============================================================================
# Helper Functions
# =============================================================================

def require_task_id(task_id: str) -> str:
    """Ensure the path carried a task id. Raises 400 otherwise."""
    if not task_id or not task_id.strip():
        raise HttpError(400, "Task ID is required")
    return task_id


# =============================================================================
# Task Endpoints
# =============================================================================

def build_task_router(use_cases: TaskUseCases) -> Router:
    """Create the tasks router bound to the given use cases."""
    router = Router(tags=["Tasks"])

    @router.get("", response={200: List[TaskOut], 500: ErrorOut}, by_alias=True)
    def list_tasks_api(request: HttpRequest):
        """
        List all tasks. Order is not guaranteed.
        """
        return [to_task_out(task) for task in use_cases.get_all_tasks()]

    @router.get("/{task_id}", response={200: TaskOut, 400: ErrorOut, 404: ErrorOut}, by_alias=True)
    def get_task_api(request: HttpRequest, task_id: str):
        """
        Get details of a single task.
        """
        task = use_cases.get_task_by_id(require_task_id(task_id))
        if not task:
            raise HttpError(404, TASK_NOT_FOUND)
        return to_task_out(task)

    @router.post("", response={201: TaskOut, 400: ErrorOut}, by_alias=True)
    def create_task_api(request: HttpRequest, payload: TaskIn):
        """
        Create a new task. The id and creation time are assigned here.
        """
        try:
            validate_title(payload.title)
        except ValueError as e:
            raise HttpError(400, str(e))

        task = use_cases.create_task(task_from_create(payload))
        logger.info(f"Created task {task.id}")
        return 201, to_task_out(task)

    @router.put("/{task_id}", response={200: TaskOut, 400: ErrorOut, 404: ErrorOut}, by_alias=True)
    def update_task_api(request: HttpRequest, task_id: str, payload: TaskUpdateIn):
        """
        Replace title, description and completion of an existing task.

        The task is looked up first so its creation time carries over. If it
        disappears between that lookup and the write, the update reports the
        same 404 as a task that never existed.
        """
        task_id = require_task_id(task_id)
        try:
            validate_title(payload.title)
        except ValueError as e:
            raise HttpError(400, str(e))

        existing = use_cases.get_task_by_id(task_id)
        if not existing:
            raise HttpError(404, TASK_NOT_FOUND)

        updated = use_cases.update_task(
            task_from_update(payload, task_id, existing.created_at)
        )
        if not updated:
            logger.info(f"Task {task_id} was deleted before its update was written")
            raise HttpError(404, TASK_NOT_FOUND)

        logger.info(f"Updated task {task_id}")
        return to_task_out(updated)

    @router.delete("/{task_id}", response={200: MessageOut, 400: ErrorOut, 404: ErrorOut})
    def delete_task_api(request: HttpRequest, task_id: str):
        """
        Delete a task.
        """
        deleted = use_cases.delete_task(require_task_id(task_id))
        if not deleted:
            raise HttpError(404, TASK_NOT_FOUND)
        logger.info(f"Deleted task {task_id}")
        return {"message": "Task deleted successfully"}

    return router
