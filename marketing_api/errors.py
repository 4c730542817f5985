"""Error taxonomy rendered as ``{"error": ..., "message": ...}`` JSON bodies."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .data_store import DataUnavailable

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, error: str, message: str, status_code: int | None = None, **extra: Any):
        super().__init__(message)
        self.error = error
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message, **self.extra}


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class AuthError(ApiError):
    """Credential mismatch (401) or role denial (403)."""

    status_code = 401


class InternalError(ApiError):
    status_code = 500

    def __init__(self, message: str = "An error occurred while processing your request", **extra: Any):
        super().__init__("Internal server error", message, **extra)


def _render(exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _render(exc)


async def _data_unavailable_handler(request: Request, exc: DataUnavailable) -> JSONResponse:
    logger.warning("Data source unavailable for %s %s: %s", request.method, request.url.path, exc)
    return _render(InternalError("Data source is unavailable"))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return _render(ValidationError("Invalid request body", "Request body could not be parsed"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(DataUnavailable, _data_unavailable_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
