"""Error handling module."""

from gatekeeper.core.errors.exceptions import (
    AppException,
    ConfigurationError,
    FieldError,
    ForbiddenError,
    ValidationError,
)


__all__ = [
    "AppException",
    "ConfigurationError",
    "FieldError",
    "ForbiddenError",
    "ValidationError",
]
