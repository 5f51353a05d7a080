"""
ASGI config for the Task Manager API.

`application` runs under any ASGI server (uvicorn config.asgi:application).
`lambda_handler` serves the same app behind API Gateway; point the Lambda
function's handler at config.asgi.lambda_handler. The in-memory store lives
per process, so each Lambda container or server worker holds its own tasks.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.conf import settings
from django.core.asgi import get_asgi_application
from mangum import Mangum

application = get_asgi_application()

lambda_handler = Mangum(
    application,
    lifespan="off",
    api_gateway_base_path=settings.API_GATEWAY_BASE_PATH,
)
