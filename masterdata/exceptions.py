"""Custom exception classes and global exception handlers."""

import logging
import traceback

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ALREADY_EXISTS = "Already Exists"
NOT_FOUND = "Not Found"
INTERNAL_SERVER_ERROR = "Internal Server Error "
BAD_REQUEST = "Bad Request"


class MasterDataException(Exception):
    """Base exception for all master data errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class AlreadyExistsException(MasterDataException):
    """An active record with the same uniqueness key exists."""

    def __init__(self, message: str = ALREADY_EXISTS):
        super().__init__(message, 400)


class NotFoundException(MasterDataException):
    """No active record matches the requested id."""

    def __init__(self, message: str = NOT_FOUND):
        super().__init__(message, 404)


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location} {message}".strip())
    return messages


def create_exception_handlers():
    """Create the application's exception handlers."""

    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject request bodies that fail DTO constraints with a 400."""
        messages = _validation_messages(exc)
        logger.warning(f"Validation failed on {request.method} {request.url.path}: {messages}")
        return JSONResponse(
            status_code=400,
            content={
                "statusCode": 400,
                "message": messages,
                "error": BAD_REQUEST,
            },
        )

    async def generic_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}")
        logger.error(f"Exception: {type(exc).__name__}: {exc}")
        tb_lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
        logger.error("".join(tb_lines))

        return JSONResponse(
            status_code=500,
            content={
                "statusCode": 500,
                "message": INTERNAL_SERVER_ERROR,
            },
        )

    return {
        RequestValidationError: validation_exception_handler,
        Exception: generic_exception_handler,
    }
