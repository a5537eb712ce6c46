"""
Pydantic schemas for API request/response validation.

This module exports all schema classes for use in API endpoints.
"""

from backend.src.schemas.event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    OrganizerEventResponse,
    EventReportResponse,
    EventCreatedResponse,
    OrganizerEventListResponse,
    EventDetailEnvelope,
    EventReportEnvelope,
    EventUpdatedResponse,
    EventDeletedResponse,
)

__all__ = [
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "OrganizerEventResponse",
    "EventReportResponse",
    "EventCreatedResponse",
    "OrganizerEventListResponse",
    "EventDetailEnvelope",
    "EventReportEnvelope",
    "EventUpdatedResponse",
    "EventDeletedResponse",
]
