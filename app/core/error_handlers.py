"""
Global exception handlers.

Response format for every failure:

    {"success": false, "message": "...", "errors": [...]}

1. APIError subclasses -> their own status_code and to_dict()
2. FastAPI request parsing errors -> 400 "Validation error"
3. Unknown routes or methods -> 404 "API endpoint not found"
4. Anything else -> 500 "Something went wrong!" (detail only in development)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.exceptions import APIError
from app.core.validation import format_errors

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on the application."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "message": "Validation error",
                "errors": format_errors(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        status_code = exc.status_code
        headers = getattr(exc, "headers", None)
        if status_code in (404, 405):
            # unmatched path or method: both are an unknown endpoint
            status_code = 404
            headers = None
            message = "API endpoint not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=status_code,
            content={"success": False, "message": message},
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        settings = get_settings()
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "Something went wrong!",
                "error": str(exc) if settings.is_development else "Internal server error",
            },
        )
