"""
Exception handlers.

Every error leaves the API as ``{"error": <summary>}`` plus ``"details"``
(a list of ``{field, message, code}``) when field errors are involved.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config.logging import api_logger as logger
from shared.utils.exceptions import AppException


def _field_path(loc: tuple) -> str:
    # Drop the "body"/"path"/"query" prefix FastAPI adds
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(),
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path/query parameters or an unparseable body."""
    details = [
        {"field": _field_path(tuple(err.get("loc", ()))), "message": err.get("msg", ""), "code": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.warning("Request rejected", path=request.url.path, fields=[d["field"] for d in details])
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
