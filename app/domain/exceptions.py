"""Domain exceptions for the cities service.

Missing records are not exceptions: the service returns ``None`` and the
HTTP layer decides the status code.
"""
from typing import Any, Dict, Optional


class CityDomainError(Exception):
    """Base exception for all city domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CityValidationError(CityDomainError):
    """Raised when city input violates a validation rule."""

    def __init__(self, field: str, message: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(
            f"Validation error in {field}: {message}",
            {"field": field, "value": value},
        )


class StorageError(CityDomainError):
    """Raised when the underlying store fails. Not retried."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"Storage failure during {operation}",
            {"operation": operation, "error": str(cause) if cause else None},
        )
