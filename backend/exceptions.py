"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""

from dtos.api_error import ApiError


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        details = {"invalid_keys": invalid_keys} if invalid_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when one or more student fields fail validation"""

    def __init__(self, errors: list[ApiError], message: str | None = None):
        self.errors = list(errors)
        msg = message or f"Validation failed for {len(self.errors)} field(s)"
        super().__init__(msg, {"errors": [error.model_dump() for error in self.errors]})


class ResourceNotFoundError(ApplicationError):
    """Raised when a requested record does not exist"""

    def __init__(self, message: str, resource_id: int | None = None):
        details = {"resource_id": resource_id} if resource_id is not None else {}
        super().__init__(message, details)
