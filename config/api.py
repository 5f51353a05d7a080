"""
NinjaAPI factory for the Task Manager API.
"""
from typing import Optional

from django.conf import settings
from ninja import NinjaAPI

from apps.core.errors import register_exception_handlers
from apps.tasks.api import build_task_router
from apps.tasks.use_cases import TaskUseCases


def create_api(use_cases: TaskUseCases, urls_namespace: Optional[str] = None) -> NinjaAPI:
    """
    Build the API with its routers and JSON error handlers.

    Pass a distinct urls_namespace when building more than one API in a
    process (tests do this to get a fresh store each time).
    """
    api = NinjaAPI(
        title=getattr(settings, 'SERVICE_NAME', 'Task Manager API'),
        version=getattr(settings, 'SERVICE_VERSION', '1.0.0'),
        description="In-memory task tracking API",
        docs_url="/docs",
        urls_namespace=urls_namespace,
    )
    register_exception_handlers(api)
    api.add_router("/tasks", build_task_router(use_cases))
    return api
