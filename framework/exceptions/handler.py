from enum import Enum
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from framework.logging.logger import get_logger
from framework.response import ResponseModel
from framework.config import settings

logger = get_logger("exception_handler")


class StorageErrorKind(str, Enum):
    """Classification of failures below the repository boundary."""
    TIMEOUT = "TIMEOUT"
    CONSTRAINT = "CONSTRAINT"
    CONNECTION = "CONNECTION"
    QUERY = "QUERY"
    MALFORMED_ROW = "MALFORMED_ROW"


class StorageError(Exception):
    """Any failure raised by a repository backend; never retried."""
    def __init__(self, message: str, kind: StorageErrorKind = StorageErrorKind.QUERY):
        super().__init__(message)
        self.message = message
        self.kind = kind


def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    trace_id = getattr(request.state, "trace_id", "unknown")

    if isinstance(exc, StorageError):
        logger.critical(f"Trace[{trace_id}] - StorageError[{exc.kind.value}]: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ResponseModel.fail(message=exc.message)
        )

    if isinstance(exc, RequestValidationError):
        logger.error(f"Trace[{trace_id}] - ValidationError: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ResponseModel.fail(message="Invalid request parameters")
        )

    logger.opt(exception=True).error(f"Trace[{trace_id}] - UncaughtException: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ResponseModel.fail(
            message="System busy, please try again later",
            trace_id=trace_id if settings.DEBUG else None
        )
    )
