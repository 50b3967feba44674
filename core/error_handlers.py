"""Error handlers for the FastAPI application.

Every error leaves the API in the same shape::

    {"error": {"message": ..., "status_code": ..., "type": ..., "details": {...}}}

User-recoverable errors (validation, no suitable recipe, missing entity) are
logged at warning level; contract defects and infrastructure faults at error
level. Store and interpreter internals never reach the client.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import AppException, InfrastructureError, InvalidInputError
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    error_type: str = "internal_error",
    details: dict = None,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        error_type: Machine-readable error kind.
        details: Optional error details dictionary.
    """
    error_body = {
        "error": {
            "message": message,
            "status_code": status_code,
            "type": error_type,
        }
    }
    if details:
        error_body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=error_body)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions raised by services and the core."""
    if isinstance(exc, InvalidInputError):
        # a malformed request reaching the core is a defect on our side
        logger.error("Invalid input reached the core: %s [%s %s]", exc.message, request.method, request.url.path)
    elif isinstance(exc, InfrastructureError):
        logger.error("Persistence failure (%s) [%s %s]", exc.details.get("operation"), request.method, request.url.path)
    else:
        logger.warning("Application error: %s [%s %s]", exc.message, request.method, request.url.path)

    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        error_type=exc.error_type,
        details=exc.details,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request bodies or parameters that do not even parse."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})

    logger.warning("Request validation error on %s %s: %s", request.method, request.url.path, errors)

    return create_error_response(
        message="Request validation error",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        error_type="request_validation_error",
        details={"validation_errors": errors},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle store errors that escaped the repositories."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, str(exc), exc_info=True)
    return create_error_response(
        message="A persistence error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_type=InfrastructureError.error_type,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with a generic message."""
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, str(exc), exc_info=True)
    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
