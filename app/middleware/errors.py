import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ERROR_MESSAGES, SchemaViolationError, ValidationIssue


logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    status.HTTP_404_NOT_FOUND: ERROR_MESSAGES["NOT_FOUND"],
    status.HTTP_405_METHOD_NOT_ALLOWED: ERROR_MESSAGES["METHOD_NOT_ALLOWED"],
}


def _error_body(message: str, issues: list[ValidationIssue] | None = None) -> dict:
    body: dict = {"error": message}
    if issues is not None:
        body["details"] = [issue.to_dict() for issue in issues]
    return body


async def schema_violation_handler(request: Request, exc: SchemaViolationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.category.value)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(exc.message, exc.issues),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Requests FastAPI itself could not parse, e.g. a malformed JSON body"""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(ERROR_MESSAGES["INVALID_JSON"]),
        )
    
    issues = [
        ValidationIssue(
            path=".".join(str(part) for part in error.get("loc", ())),
            message=error.get("msg", ""),
            code=error.get("type", "custom"),
        )
        for error in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ERROR_MESSAGES["VALIDATION_FAILED"], issues),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = _STATUS_MESSAGES.get(exc.status_code)
    if message is None:
        message = exc.detail if isinstance(exc.detail, str) else ERROR_MESSAGES["INTERNAL_SERVER_ERROR"]
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(message),
        headers=exc.headers,
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal detail to the caller
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(ERROR_MESSAGES["INTERNAL_SERVER_ERROR"]),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SchemaViolationError, schema_violation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
