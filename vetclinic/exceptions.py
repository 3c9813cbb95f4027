"""
Global exception handlers and custom exception classes.

Every error leaves the API shaped as ``{"ok": false, "msg": ...}``.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Set up logging
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Error interno"


class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = GENERIC_ERROR_MESSAGE

    def __init__(self, detail: str = None, status_code: int = None):
        super().__init__(detail or self.detail)
        if detail is not None:
            self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        self.headers = None


class MissingFieldsException(AppException):
    """Raised when a required field is absent from the request body."""
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Todos los campos son obligatorios"


class ResourceNotFoundException(AppException):
    """Raised when a referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Recurso no encontrado"


class InternalServerException(AppException):
    """Raised when storage or another collaborator fails unexpectedly."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = GENERIC_ERROR_MESSAGE


def error_body(message: str, **extra) -> dict:
    """Build the standard error payload."""
    body = {"ok": False, "msg": message}
    body.update(extra)
    return body


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Standardized error response
    """
    if exc.status_code >= 500:
        logger.error(f"Application error on {request.method} {request.url.path}: {exc.detail}")
    else:
        logger.info(f"Request rejected on {request.method} {request.url.path}: {exc.status_code} {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail),
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: Standardized error response with validation details
    """
    logger.warning(f"Validation error: {exc.errors()}")
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body("Datos inválidos", errors=errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for framework HTTP errors such as unknown routes.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Handler for storage failures. Details are logged, never returned.
    """
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(GENERIC_ERROR_MESSAGE),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Last-resort handler for unexpected exceptions.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(GENERIC_ERROR_MESSAGE),
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
