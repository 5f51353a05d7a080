import logging
import time
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

from .errors import error_body

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs one line per request: method, path, status and duration.
    """

    def process_request(self, request):
        request._started_at = time.monotonic()

    def process_response(self, request, response):
        started_at = getattr(request, '_started_at', None)
        if started_at is None:
            logger.info(f"{request.method} {request.path} -> {response.status_code}")
        else:
            elapsed_ms = (time.monotonic() - started_at) * 1000
            logger.info(f"{request.method} {request.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response


class JsonMethodNotAllowedMiddleware(MiddlewareMixin):
    """
    Rewrites plain-text 405 responses (ninja's path views emit
    b"Method not allowed") into the API's {"error": ...} shape.
    """

    def process_response(self, request, response):
        if response.status_code != 405 or response.get('Content-Type', '').startswith('application/json'):
            return response
        json_response = JsonResponse(error_body("Method not allowed"), status=405)
        if response.has_header('Allow'):
            json_response['Allow'] = response['Allow']
        return json_response
