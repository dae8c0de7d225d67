"""Error handling module with RFC 7807 Problem Details."""

from kangaroute.core.errors.boundary import service_boundary
from kangaroute.core.errors.exceptions import (
    AppException,
    ConflictError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from kangaroute.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "ConflictError",
    # Handlers
    "FieldError",
    "InternalError",
    "NotFoundError",
    "ProblemDetail",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
    # Boundary
    "service_boundary",
]
