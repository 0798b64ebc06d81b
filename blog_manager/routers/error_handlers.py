"""Map domain errors to HTTP responses ({"detail": message})."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from blog_manager.core.errors import (
    InvariantViolation,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (InvariantViolation, 409),
    (StorageError, 500),
)


def register_error_handlers(app: FastAPI) -> None:
    for error_cls, status_code in _STATUS_BY_ERROR:
        app.add_exception_handler(error_cls, _handler_for(status_code))


def _handler_for(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler
