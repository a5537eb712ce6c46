"""
Service layer for business logic.

This module exports all service classes for use in API endpoints.
"""

from backend.src.services.event_service import EventService
from backend.src.services.exceptions import (
    ServiceError,
    NotFoundError,
    ValidationError,
    StoreError,
)

__all__ = [
    "EventService",
    "ServiceError",
    "NotFoundError",
    "ValidationError",
    "StoreError",
]
