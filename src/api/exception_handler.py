import logging
import traceback

from django.conf import settings
from django.db import DatabaseError
from ninja.errors import AuthenticationError, HttpError
from ninja.errors import ValidationError as NinjaValidationError
from ninja_extra import NinjaExtraAPI

from src.core.apis import request_id_of
from src.core.exceptions import APIError

logger = logging.getLogger(__name__)


def attach_exception_handlers(api: NinjaExtraAPI) -> None:
    def _envelope(request, *, message: str, status: int, code: str, data=None, errors=None, extra=None,):
        return api.create_response(
            request,
            {
                "success": 200 <= status < 400,
                "message": message,
                "data": data or {},
                "extra": extra or {},
                "errors": errors,
                "code": code,
                "request_id": request_id_of(request),
            },
            status=status,
        )

    @api.exception_handler(APIError)
    def on_api_error(request, exc: APIError):
        return _envelope(
            request,
            message=exc.message,
            status=exc.status,
            code=exc.code,
            errors=exc.errors,
            extra=exc.extra,
        )

    @api.exception_handler(AuthenticationError)
    def on_authentication_error(request, exc: AuthenticationError):
        return _envelope(request, message="Unauthorized", status=401, code="UNAUTHORIZED")

    @api.exception_handler(NinjaValidationError)
    def on_ninja_validation_error(request, exc: NinjaValidationError):
        return _envelope(
            request,
            message="Validation error",
            status=422,
            code="VALIDATION_ERROR",
            errors=exc.errors,
        )

    @api.exception_handler(HttpError)
    def on_http_error(request, exc: HttpError):
        # ninja answers an unparseable body with HttpError(400)
        if exc.status_code == 400:
            return _envelope(
                request,
                message="Validation error",
                status=422,
                code="VALIDATION_ERROR",
                errors=str(exc),
            )
        return _envelope(request, message=str(exc), status=exc.status_code, code="HTTP_ERROR")

    @api.exception_handler(DatabaseError)
    def on_database_error(request, exc: DatabaseError):
        # Driver messages carry schema and query details; they stay in the logs.
        logger.exception("Database error while handling %s %s", request.method, request.path)
        return _envelope(request, message="Unexpected error", status=500, code="INTERNAL_ERROR")

    @api.exception_handler(Exception)
    def on_unexpected_error(request, exc: Exception):
        logger.exception("Unhandled error while handling %s %s", request.method, request.path)
        err = None
        extra = {}
        if settings.DEBUG:
            err = str(exc)
            extra["trace"] = traceback.format_exc(limit=20)
        return _envelope(
            request,
            message="Unexpected error",
            status=500,
            code="INTERNAL_ERROR",
            errors=err,
            extra=extra if settings.DEBUG else None,
        )
