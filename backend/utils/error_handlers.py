"""
Error handling decorators and exception handlers for API endpoints.

This module centralizes the mapping from application exceptions to HTTP
responses so individual routes only deal with the success path:

- ValidationError         -> 400, JSON list of {"field", "message"}
- RequestValidationError  -> 400, same shape (malformed request bodies)
- ResourceNotFoundError   -> 404, plain-text message
- anything unexpected     -> 500
"""

from functools import wraps
from typing import Callable, List
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
import logging

from constants import HTTPStatus
from dtos import ApiError
from exceptions import (
    ApplicationError,
    ResourceNotFoundError,
    ValidationError,
)
from services.student_error_mapper import to_external_field

logger = logging.getLogger(__name__)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle unexpected API errors consistently across endpoints.

    Application errors are re-raised untouched so the handlers registered by
    add_error_handlers() can render them with their own status and body.
    Anything else is logged and converted into a 500 HTTPException.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create student")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("")
        @handle_api_errors("Create student")
        def create_student(...):
            return service.create_student(student_dto)
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ApplicationError, HTTPException):
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed. Please check server logs or contact support."
                )

        return wrapper

    return decorator


def api_errors_response(errors: List[ApiError]) -> JSONResponse:
    """Render ApiErrors as a 400 JSON array."""
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=jsonable_encoder(errors)
    )


def request_errors_to_api_errors(exc: RequestValidationError) -> List[ApiError]:
    """
    Convert FastAPI request validation errors into ApiErrors.

    The field is the last named element of the error location (e.g. "studentEmail"
    for ("body", "studentEmail")), renamed to its external name if needed.
    Positional parts such as JSON offsets are skipped.
    """
    api_errors = []
    for error in exc.errors():
        location = [part for part in error.get("loc", ()) if isinstance(part, str)]
        field = location[-1] if location else "body"
        api_errors.append(ApiError(field=to_external_field(field), message=error.get("msg", "Invalid value")))
    return api_errors


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return api_errors_response(exc.errors)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    api_errors = request_errors_to_api_errors(exc)
    logger.warning(f"Rejected malformed request to {request.url.path}: {len(api_errors)} error(s)")
    return api_errors_response(api_errors)


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=HTTPStatus.NOT_FOUND)


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"detail": exc.message}
    )


def add_error_handlers(app: FastAPI):
    """Register the application's exception handlers on a FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(ApplicationError, application_error_handler)
