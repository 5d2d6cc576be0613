"""
API Errors

Every error leaves the API as {"error": "<message>"} with its status code.
Database and unexpected failures are logged server-side and only a static
message reaches the client.
"""

from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging import get_logger

logger = get_logger("errors")


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class FileTypeError(ApiError):
    status_code = 400


class FileTooLargeError(ApiError):
    status_code = 413


class AuthError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class DatabaseError(ApiError):
    status_code = 500


@contextmanager
def database_errors(message: str, db: Session = None, conflict_message: str = None):
    """
    Turn any SQLAlchemy failure inside the block into DatabaseError(message).
    With conflict_message, a constraint violation becomes ValidationError(conflict_message).

    Usage:
        with database_errors("Database error while fetching users.", db):
            rows = fetch_all(db, "SELECT * FROM users")
    """
    try:
        yield
    except SQLAlchemyError as e:
        if db is not None:
            db.rollback()
        if conflict_message and isinstance(e, IntegrityError):
            logger.info("Constraint violation: %s", e.orig)
            raise ValidationError(conflict_message) from e
        logger.exception("%s (%s)", message, e.__class__.__name__)
        raise DatabaseError(message) from e


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown routes (404) and wrong methods (405) come from the router
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request payload."})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
