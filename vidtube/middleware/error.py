import traceback
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from vidtube.config.environments import IS_PRODUCTION
from vidtube.utility.errors import ApiError
from vidtube.utility.logger import get_logger
from vidtube.utility.response import envelope

logger = get_logger("error")


def _error_response(status_code: int, message: str, errors=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(status_code, message, error=errors or [])),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, ApiError):
        message, errors = exc.message, exc.errors
    else:
        message, errors = str(exc.detail), []

    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
    return _error_response(exc.status_code, message, errors, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header", "cookie")]
        errors.append({
            "field": ".".join(location) or "request",
            "message": error.get("msg", "Invalid value"),
        })
    return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error_response(status.HTTP_409_CONFLICT, "Resource already exists")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)

    if IS_PRODUCTION:
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    stack = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or "Internal server error",
        [{"field": None, "message": str(exc), "stack": [line.rstrip() for line in stack]}],
    )


def add_exception_handlers(application):
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(IntegrityError, integrity_error_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
