"""Plain Django views that live outside the ninja API."""
from django.conf import settings
from django.http import HttpRequest, JsonResponse

from .errors import INTERNAL_ERROR_MESSAGE, error_body


def service_status(request: HttpRequest):
    """Liveness probe at the site root."""
    return JsonResponse({
        "status": "running",
        "service": getattr(settings, 'SERVICE_NAME', 'Task Manager API'),
        "version": getattr(settings, 'SERVICE_VERSION', '1.0.0'),
    })


def missing_task_id(request: HttpRequest):
    """/api/tasks/ with an empty id segment, for any method."""
    return JsonResponse(error_body("Task ID is required"), status=400)


def not_found(request: HttpRequest, exception=None):
    """handler404: URLs no route matches."""
    return JsonResponse(error_body("Not Found"), status=404)


def server_error(request: HttpRequest):
    """handler500: keep faults outside the API in the same JSON shape."""
    return JsonResponse(error_body(INTERNAL_ERROR_MESSAGE), status=500)
