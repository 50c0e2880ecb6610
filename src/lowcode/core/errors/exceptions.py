"""Domain exceptions for the application.

Authorization and validation *decisions* are plain return values in the
core; services turn negative decisions into these exceptions, and the
exception handlers render them as RFC 7807 Problem Details.
"""

from collections.abc import Mapping
from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

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


class NotFoundError(AppException):
    """Raised when a model definition, record or user does not exist.

    Example:
        raise NotFoundError("Model not found", resource="model", resource_id=name)
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
    """Raised when there's a conflict with existing data."""

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class ValidationError(AppException):
    """Raised when a record payload fails model validation.

    Carries every failing field at once, as produced by
    ``validate_model_data``.

    Example:
        raise ValidationError(
            "Validation failed",
            field_errors={"price": "Price must be a number"},
        )
    """

    message = "Validation failed"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        field_errors: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        self.field_errors = dict(field_errors or {})
        if self.field_errors:
            details["errors"] = [
                {"field": field, "message": error}
                for field, error in self.field_errors.items()
            ]
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid."""

    message = "Not authenticated"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when a principal is denied an action or a record.

    Example:
        raise ForbiddenError(
            "Permission denied",
            details={"model": "Product", "action": "delete"}
        )
    """

    message = "Permission denied"
    error_code = "permission_denied"
    status_code = 403


class BadRequestError(AppException):
    """Raised for general client errors."""

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400
