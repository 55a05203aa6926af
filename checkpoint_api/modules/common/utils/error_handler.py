"""Utility functions for mapping domain exceptions to HTTP exceptions."""

import logging
import math
from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..constants import EXCEPTION_MAPPING
from ..exceptions import DomainError

INTERNAL_ERROR_DETAIL = "Internal server error"


def map_exception(error: DomainError) -> HTTPException:
    """Map a domain exception to a corresponding HTTP exception."""
    for exception_class, mapper in EXCEPTION_MAPPING.items():
        if isinstance(error, exception_class):
            return mapper(str(error))

    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)


def _encode_float(value: float) -> Union[float, str]:
    return value if math.isfinite(value) else str(value)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global handlers for domain exceptions and request validation errors."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Convert domain exceptions to appropriate HTTP responses."""
        http_exception = map_exception(exc)
        return JSONResponse(
            status_code=http_exception.status_code,
            content={"detail": http_exception.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report validation errors, rendering rejected NaN or infinite inputs as strings."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors(), custom_encoder={float: _encode_float})},
        )


def handle_exception(
    error: Exception, logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None
) -> HTTPException:
    """Translate any exception raised inside a route handler into an HTTPException.

    Domain errors are mapped through EXCEPTION_MAPPING and HTTPExceptions pass
    through untouched. Anything else is a storage or infrastructure failure:
    it is logged with its traceback and reported as an opaque 500.

    Args:
        error: The exception to handle
        logger: Logger used to record unexpected failures

    Returns:
        The HTTPException to raise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, DomainError):
        return map_exception(error)

    if logger is not None:
        logger.error("Unhandled error while processing request", exc_info=error)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)
