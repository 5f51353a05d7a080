"""
API error handling.

Every error leaving the API has the same body shape: {"error": "<message>"}.
Anything not handled explicitly becomes a logged 500 with a generic message.
"""
import logging

from django.http import Http404, HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_body(message: str) -> dict:
    return {"error": message}


def format_validation_errors(errors: list) -> str:
    """Flatten pydantic errors into "field: message; ..."."""
    parts = []
    for err in errors:
        # loc looks like ("body", "payload", "title"); the field is the tail
        loc = [str(p) for p in err.get("loc", ())[2:]]
        msg = err.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


def register_exception_handlers(api: NinjaAPI) -> None:
    """Attach the JSON error handlers to a NinjaAPI instance."""

    @api.exception_handler(HttpError)
    def http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(request, error_body(exc.message), status=exc.status_code)

    @api.exception_handler(ValidationError)
    def validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(request, error_body(format_validation_errors(exc.errors)), status=400)

    @api.exception_handler(Http404)
    def not_found(request: HttpRequest, exc: Http404):
        return api.create_response(request, error_body("Not Found"), status=404)

    @api.exception_handler(Exception)
    def unexpected_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return api.create_response(request, error_body(INTERNAL_ERROR_MESSAGE), status=500)
