"""Error handlers for the REST API.

Every ``InterchangeError`` becomes a structured failure payload:
``{"success": false, "error": ..., "error_type": ..., "details": ...}``.
Request bodies the schemas reject get the same shape with a 400 status.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cabinetry.application.errors import (
    AuthorizationError,
    InputError,
    InterchangeError,
    RecordValidationError,
    StoreError,
)

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, exc: InterchangeError, details: dict | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": exc.message,
            "error_type": exc.error_type,
            "details": details,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(InputError)
    async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
        return _error_response(400, exc)

    @app.exception_handler(RecordValidationError)
    async def record_error_handler(
        request: Request, exc: RecordValidationError
    ) -> JSONResponse:
        return _error_response(400, exc, {"row": exc.row} if exc.row else None)

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(
        request: Request, exc: AuthorizationError
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(f"Store error on {request.url.path}: {exc.message}")
        return _error_response(500, exc)

    @app.exception_handler(InterchangeError)
    async def interchange_error_handler(
        request: Request, exc: InterchangeError
    ) -> JSONResponse:
        return _error_response(500, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(f"Rejected request body on {request.url.path}")
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": "Invalid request body",
                "error_type": "input",
                "details": {"errors": jsonable_encoder(exc.errors())},
            },
        )
