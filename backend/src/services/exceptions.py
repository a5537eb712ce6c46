"""
Custom exceptions for service layer.

Provides specific exception types for business logic errors
that can be translated to appropriate HTTP responses.
"""

from typing import Any, Optional


class ServiceError(Exception):
    """Base exception for service layer errors."""
    pass


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class StoreError(ServiceError):
    """Raised when the relational store fails to complete an operation.

    Wraps connectivity errors and constraint violations alike. The original
    database exception is chained as ``__cause__`` for logging and never
    exposed to API callers.
    """

    def __init__(self, operation: str, identifier: Any = None):
        self.operation = operation
        self.identifier = identifier
        if identifier is None:
            self.message = f"Failed to {operation}"
        else:
            self.message = f"Failed to {operation} {identifier}"
        super().__init__(self.message)
