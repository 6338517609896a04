"""
Error types and exception handlers shared by all services.

Services raise :class:`RecordNotFoundError` when a lookup misses; the
handler registered here turns it into a 404 response whose body is
``{"message": ...}``.  Request validation failures are reported with the
same ``message`` key plus a list of the individual field errors.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class RecordNotFoundError(Exception):
    """Raised when no record matches the requested identifier."""

    def __init__(self, message: str = "Record not found") -> None:
        self.message = message
        super().__init__(message)


def _summarize_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    # ``exc.errors()`` may carry exception instances in ``ctx`` which are
    # not JSON serialisable, so only the stable keys are returned.
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Install the service exception handlers on ``app``."""

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        logger.info("%s %s -> 404: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _summarize_errors(exc)
        logger.info("%s %s -> 422: %d validation error(s)", request.method, request.url.path, len(errors))
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request body", "errors": errors},
        )
