"""Global exception handlers that answer with the ServiceResponse envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_backend.api.models import ServiceResponse
from users_backend.api.validation import (
    RequestValidationFailure,
    describe_validation_errors,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationFailure)
    async def request_validation_failure_handler(
        request: Request, exc: RequestValidationFailure
    ) -> JSONResponse:
        return exc.response.to_json_response()

    @app.exception_handler(RequestValidationError)
    async def fastapi_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = f"Validation error: {describe_validation_errors(list(exc.errors()))}"
        logger.warning("Validation error on %s: %s", request.url.path, message)
        return ServiceResponse.failure(message).to_json_response()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = ServiceResponse.failure(str(exc.detail), status_code=exc.status_code)
        return response.to_json_response(headers=exc.headers)

    # ServerErrorMiddleware re-raises after this runs, so the server logs the traceback.
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        response = ServiceResponse.failure(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        return response.to_json_response()
