"""
URL configuration for the Task Manager API.

This module is the process-wide composition root: the task container and
the API are built exactly once, when Django first loads the URLconf.
"""
from django.urls import path

from apps.core.views import missing_task_id, service_status
from apps.tasks.container import build_task_container
from .api import create_api

container = build_task_container()
api = create_api(container.use_cases)

urlpatterns = [
    path('', service_status, name='service-status'),
    path('api/tasks/', missing_task_id),
    path('api/', api.urls),
]

handler404 = 'apps.core.views.not_found'
handler500 = 'apps.core.views.server_error'
