"""
Error Handling Module

Domain exceptions raised by the service layer and the FastAPI exception
handlers that turn them into JSON responses. Every failure leaves the API as
``{"message": "..."}`` with an appropriate status code; nothing beyond a
human-readable message crosses the boundary.
"""
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sparkboard.core.config import settings
from sparkboard.core.log import logger


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Unauthenticated(AppError):
    """
    Missing or invalid credential.

    ``clear_credential`` is set when a credential was presented but failed
    verification, so the handler also expires the stored cookie.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: Optional[str] = None, clear_credential: bool = False):
        super().__init__(message)
        self.clear_credential = clear_credential


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


# Driver specific markers of a unique-constraint violation
_PG_UNIQUE_VIOLATION = "23505"
_MYSQL_DUPLICATE_ENTRY = 1062
_SQLITE_UNIQUE_MARKER = "UNIQUE constraint failed"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when the store rejected a write because of a uniqueness constraint."""
    orig = getattr(exc, "orig", None)
    if orig is None:
        return False

    # psycopg / asyncpg expose the SQLSTATE
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate is not None:
        return sqlstate == _PG_UNIQUE_VIOLATION

    # PyMySQL: args = (errno, message)
    args = getattr(orig, "args", ())
    if args and args[0] == _MYSQL_DUPLICATE_ENTRY:
        return True

    return _SQLITE_UNIQUE_MARKER in str(orig)


def _message_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the "body"/"query"/"path" prefix from the location
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        # Messages raised by our own validators are already human readable
        return message[len("Value error, "):]
    if location:
        return f"{'.'.join(location)}: {message}"
    return message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    response = _message_response(exc.status_code, exc.message, headers)
    if isinstance(exc, Unauthenticated) and exc.clear_credential:
        response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _message_response(status.HTTP_400_BAD_REQUEST, _format_validation_error(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
