"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Raised when request data is missing or malformed.

    Example:
        raise ValidationError(
            "All required fields must be provided",
            missing_fields=["tax_id"],
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        missing_fields: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        if missing_fields:
            details["missing_fields"] = missing_fields
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when credentials or the bearer token are missing or invalid.

    Example:
        raise UnauthorizedError("Invalid or expired token")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class NotFoundError(AppException):
    """Raised when no matching row is owned by the caller.

    "Does not exist" and "belongs to another tenant" are deliberately
    reported the same way.

    Example:
        raise NotFoundError("Vehicle not found", resource="vehicle", resource_id=str(id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when a uniqueness rule would be violated.

    Example:
        raise ConflictError("A vehicle with this license plate already exists")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class InternalError(AppException):
    """Raised when the store, hasher or token signer fails unexpectedly.

    The message is generic; the original cause is logged, never returned.
    """

    message = "Internal server error"
    error_code = "internal_error"
    status_code = 500
