"""Exception handlers mapping domain and validation errors to HTTP responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.domain.exceptions import CityValidationError, StorageError

logger = logging.getLogger(__name__)


async def city_validation_error_handler(request: Request, exc: CityValidationError):
    """Invalid city input -> 400."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "field": exc.field},
    )


async def body_validation_error_handler(request: Request, exc: Exception):
    """Schema validation failures -> 400 instead of FastAPI's 422."""
    if isinstance(exc, ValidationError):
        errors = exc.errors(include_url=False)
    else:
        errors = exc.errors()
    logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} validation error(s)")
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(errors)},
    )


async def storage_error_handler(request: Request, exc: StorageError):
    """Store failures are fatal for the request -> 500."""
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Storage unavailable", "operation": exc.operation},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CityValidationError, city_validation_error_handler)
    app.add_exception_handler(RequestValidationError, body_validation_error_handler)
    app.add_exception_handler(ValidationError, body_validation_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
