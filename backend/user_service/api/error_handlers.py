"""Error Handlers — global exception handlers rendering typed errors as problem details.

Invariants:
    - UserServiceError -> problem with the error's own ProblemType, title and status
    - RequestValidationError (body missing, malformed JSON, wrong types) -> 422 invalid-json
    - StorageError never leaks driver text unless expose_error_details is on
    - Router 404/405 and anything uncaught are left to ProblemDetailsMiddleware

Design Decisions:
    - Dispatch on exception class (registered handler per type), never on message text
    - Extracted from main.py: main only wires, this module decides
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from user_service.api.problem_details import problem_response
from user_service.config import get_settings
from user_service.core.errors import (
    DecodeError, ErrorSeverity, FieldError, StorageError, UserServiceError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_service_error_handler(app)
    _register_validation_error_handler(app)


def _register_user_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        """Handle all user-service domain/infrastructure errors."""
        _log_error(request, exc)
        return problem_response(
            exc.problem,
            instance=request.url.path,
            detail=_public_detail(exc),
            title=exc.title,
            errors=exc.field_errors,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body could not be decoded into the request schema."""
        error = DecodeError([FieldError.from_error_dict(e) for e in exc.errors()])
        _log_error(request, error)
        return problem_response(
            error.problem,
            instance=request.url.path,
            detail=error.message,
            errors=error.field_errors,
        )


def _public_detail(exc: UserServiceError) -> str | None:
    if isinstance(exc, StorageError):
        return exc.internal_detail if get_settings().expose_error_details else None
    return exc.message


def _log_error(request: Request, exc: UserServiceError) -> None:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
        "problem_type": exc.problem.value,
    }
    if exc.context.user_id:
        extra["user_id"] = exc.context.user_id
    if exc.severity is ErrorSeverity.CRITICAL:
        logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
