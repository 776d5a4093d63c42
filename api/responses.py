"""
Response envelope and error handling shared by every router.

Success bodies are ``{"success": true, "data": ...}``; failures are
``{"success": false, "error": "..."}`` with the matching status code.
"""

import functools
import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models.api import ApiResponse

logger = logging.getLogger(__name__)


def ok(data: Any) -> dict[str, Any]:
    """Wrap ``data`` in the success envelope, serialising models with camelCase keys."""
    return {"success": True, "data": jsonable_encoder(data, by_alias=True, exclude_none=True)}


def error_body(message: str) -> dict[str, Any]:
    return ApiResponse(success=False, error=message).model_dump(exclude_none=True)


def route_errors(message: str):
    """
    Report unexpected exceptions from a route as a 500 envelope carrying ``message``.

    HTTPExceptions raised deliberately by the route pass through untouched.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception:
                logger.exception(message)
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)

        return wrapper

    return decorator


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.info(f"Rejected request to {request.url.path}: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"Invalid request: {detail}"),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
