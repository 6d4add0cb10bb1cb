"""Global exception handlers: every failure leaves the API as the
`{"Status": "Error", "Error": <message>}` envelope."""

import logging
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from students_api.errors import (
    DecodeError,
    EmptyBodyError,
    InvalidIdError,
    StudentsAPIError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# pydantic error types reported as "field X is required"
REQUIRED_ERROR_TYPES = {"missing", "required"}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StudentsAPIError, students_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def students_api_error_handler(request: Request, exc: StudentsAPIError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}",
        extra={"path": request.url.path, "error": exc.message},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return await students_api_error_handler(request, translate_validation_error(exc.errors(), exc.body))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}",
        extra={"path": request.url.path, "error": str(exc.detail)},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"Status": "Error", "Error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all, the client never sees internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"Status": "Error", "Error": "internal server error"},
    )


def translate_validation_error(errors: List[dict], body=None) -> StudentsAPIError:
    """Map FastAPI's request validation errors onto the API's own errors.

    Checked in request order: body decoding, then field validation, then the
    path id.
    """
    body_errors = [e for e in errors if e["loc"] and e["loc"][0] == "body"]
    path_errors = [e for e in errors if e["loc"] and e["loc"][0] == "path"]

    for e in body_errors:
        if e["type"] == "json_invalid":
            # whitespace only is as empty as no body at all
            if isinstance(body, (str, bytes)) and not body.strip():
                return EmptyBodyError()
            return DecodeError(e.get("ctx", {}).get("error", e["msg"]))
        if len(e["loc"]) == 1:
            # the body as a whole is absent or not an object
            if e["type"] == "missing":
                return EmptyBodyError()
            return DecodeError(e["msg"])

    field_errors = [e for e in body_errors if len(e["loc"]) > 1]
    if field_errors:
        return ValidationError(_field_messages(field_errors))

    if path_errors:
        return InvalidIdError(path_errors[0].get("input"))

    return ValidationError([e["msg"] for e in errors])


def _field_messages(errors: List[dict]) -> List[str]:
    messages = {}
    for e in errors:
        field = str(e["loc"][-1]).capitalize()
        if field in messages:
            continue
        if e["type"] in REQUIRED_ERROR_TYPES:
            messages[field] = f"field {field} is required"
        else:
            messages[field] = f"field {field} is invalid"
    return list(messages.values())
