"""
Error handlers - translate every failure into a JSend envelope.

4xx -> {"status": "fail", "data": {"message": ...}}
5xx -> {"status": "error", "message": ...}; internals are hidden unless DEBUG.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import jsend
from app.core.config import settings
from app.core.exceptions import AppError

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal Server Error"

_HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Resource not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build the envelope for a status code: fail for 4xx, error for 5xx."""
    if status_code >= 500:
        content = jsend.error(message)
    else:
        content = jsend.fail({"message": message})
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Flatten pydantic errors into "field: msg; field: msg"."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "form")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = _HTTP_MESSAGES.get(exc.status_code)
        if message is None:
            message = exc.detail if isinstance(exc.detail, str) else GENERIC_SERVER_ERROR
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}")
        return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        message = (str(exc) or GENERIC_SERVER_ERROR) if settings.DEBUG else GENERIC_SERVER_ERROR
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
