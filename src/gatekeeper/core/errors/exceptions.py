"""Domain exceptions for the application.

These exceptions represent business-logic errors. Each carries a
machine-readable error code and an HTTP status code so a host
framework can convert them to responses without extra mapping.
"""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """Represents a single field validation error."""

    field: str
    message: str


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
    """Raised when submitted data violates a field-scoped rule.

    The caller can recover by correcting the offending fields.

    Example:
        raise ValidationError(
            "Protected role cannot be modified",
            errors=[{"field": "name", "message": "Name cannot change"}],
            collection="roles",
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        collection: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        if collection:
            details["collection"] = collection
        super().__init__(message=message, details=details, **kwargs)

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Raw ``{field, message}`` entries."""
        return list(self.details.get("errors", []))

    @property
    def field_errors(self) -> list[FieldError]:
        return [FieldError(**error) for error in self.errors]

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in reported order."""
        return [error["field"] for error in self.errors]


class ForbiddenError(AppException):
    """Raised when an operation is denied outright.

    There is no corrective input for this error.

    Example:
        raise ForbiddenError(
            "Protected roles cannot be deleted",
            details={"role": "super_admin"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class ConfigurationError(AppException):
    """Raised when the project configuration file cannot be used.

    Example:
        raise ConfigurationError("Invalid gatekeeper.yaml", details={"path": path})
    """

    message = "Invalid configuration"
    error_code = "configuration_error"
    status_code = 500
