"""Service boundary decorator.

Entity services wrap each public operation with ``service_boundary`` so that
expected conditions keep their specific error kind while anything else
(driver errors, hasher or signer failures) becomes an ``InternalError``.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import structlog

from kangaroute.core.errors.exceptions import AppException, InternalError


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def service_boundary(
    operation: str,
    message: str | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Map unexpected exceptions raised by a service coroutine to InternalError.

    Args:
        operation: Dotted name used in logs, e.g. ``"vehicles.create"``
        message: User-facing message for the InternalError

    Returns:
        Decorator for async service methods

    Example:
        class VehicleService:
            @service_boundary("vehicles.create")
            async def create(self, ...) -> Vehicle:
                ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except AppException:
                raise
            except Exception as exc:
                logger.exception(
                    "service_operation_failed",
                    operation=operation,
                    error_type=type(exc).__name__,
                )
                raise InternalError(message) from exc

        return wrapper

    return decorator
