"""
Exception handlers that turn application, validation and database
errors into `{"error": ..., "code": ...}` JSON responses.
"""

from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hostelcare.config.logging import get_logger
from hostelcare.core.exceptions import BaseAppException, ErrorCode

logger = get_logger(__name__)


async def handle_application_exception(request: Request, exc: BaseAppException) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=exc if exc.status_code >= 500 else None,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors: Dict[str, Any] = {}
    for error in exc.errors():
        field_path = '.'.join(str(x) for x in error['loc'])
        field_errors[field_path] = error['msg']

    logger.warning(
        f"Validation error: {len(field_errors)} field(s) failed validation",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Request validation failed",
            "code": ErrorCode.VALIDATION_ERROR.value,
            "details": {"field_errors": field_errors},
        },
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        f"Database error: {exc.__class__.__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Database operation failed",
            "code": ErrorCode.INTERNAL_ERROR.value,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, handle_application_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
