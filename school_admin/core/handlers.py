# school_admin/core/handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from school_admin.core.exceptions import (
    BaseAPIException,
    InvalidInputException,
    MalformedPayloadException,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


# 1. Errors raised on purpose by the application
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return _error_response(exc.status_code, exc.message)


def field_problems(errors) -> dict:
    """Flatten pydantic errors into {"field.path": "message"}."""
    details = {}
    for error in errors:
        field = ".".join(str(x) for x in error["loc"] if x not in ("body", "query"))
        details[field or "body"] = error["msg"]
    return details


# 2. Request validation errors raised by FastAPI before the endpoint runs
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        error = MalformedPayloadException()
    else:
        error = InvalidInputException(details=field_problems(errors))

    logger.warning(f"{request.method} {request.url.path} rejected: {error.message} {error.details or ''}")
    return _error_response(error.status_code, error.message)


# 3. Standard HTTP errors (unknown route, wrong method, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


# 4. Anything else: log everything, tell the client nothing
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled exception at {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
