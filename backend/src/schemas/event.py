"""
Pydantic schemas for event API request/response validation.

Provides data validation and serialization for:
- Event creation and full-replace update requests
- Event API responses (single event, organizer listing, report)
- Response envelopes ({success, data} / {message, event})

Design:
- Request fields are all optional at the schema level; missing required
  fields are reported by EventService as a 400, not as a 422
- date and deadline arrive as ISO strings and are parsed by EventService,
  so a malformed value is a 400 with the service's message
- Timestamps are stored as naive UTC and serialized with a "Z" suffix
"""

from datetime import datetime, date as Date
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator


def _strip_text(v: Optional[str]) -> Optional[str]:
    return v.strip() if isinstance(v, str) else v


# ============================================================================
# Request Schemas
# ============================================================================


class EventCreate(BaseModel):
    """
    Schema for creating a new event.

    Required (checked by the service):
        name, date, venue, category, created_by, deadline

    Optional:
        description: Defaults to ""
        max_participants: Defaults to 100
    """

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None)
    date: Optional[str] = Field(default=None, description="ISO date the event takes place")
    venue: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)
    created_by: Optional[int] = Field(default=None, description="Organizer user id")
    deadline: Optional[str] = Field(
        default=None,
        description="ISO 8601 registration deadline, must be in the future",
    )
    max_participants: Optional[int] = Field(default=None)

    @field_validator("name", "venue", "category")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        """Whitespace-only values count as missing."""
        return _strip_text(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Beach Cleanup",
                "description": "Bring gloves",
                "date": "2026-11-20",
                "venue": "North Pier",
                "category": "Community",
                "created_by": 7,
                "deadline": "2026-11-15T18:00:00Z",
                "max_participants": 40,
            }
        }
    }


class EventUpdate(BaseModel):
    """
    Schema for replacing an existing event.

    This is a full replace: omitted description and max_participants are
    reset to "" and 100. created_by cannot be changed.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None)
    date: Optional[str] = Field(default=None, description="ISO date the event takes place")
    venue: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)
    deadline: Optional[str] = Field(default=None, description="ISO 8601 registration deadline")
    max_participants: Optional[int] = Field(default=None)

    @field_validator("name", "venue", "category")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        """Whitespace-only values count as missing."""
        return _strip_text(v)


# ============================================================================
# Response Schemas
# ============================================================================


class EventResponse(BaseModel):
    """
    Schema for a stored event.

    Example:
        >>> response = EventResponse.model_validate(event_obj)
    """

    event_id: int
    name: str
    description: str
    date: Date
    venue: str
    category: str
    created_by: int
    deadline: datetime
    max_participants: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("deadline", "created_at", "updated_at")
    def serialize_datetime_utc(self, v: Optional[datetime]) -> Optional[str]:
        """Serialize datetime as ISO 8601 with explicit UTC timezone (Z suffix)."""
        return v.isoformat() + "Z" if v else None

    model_config = {"from_attributes": True}


class OrganizerEventResponse(EventResponse):
    """Event as listed for its organizer, with distinct participant counts."""

    reg_count: int = Field(..., ge=0, description="Distinct registered users")
    vol_count: int = Field(..., ge=0, description="Distinct volunteer applicants")


class EventReportResponse(BaseModel):
    """Attendance summary of a single event."""

    total_attendees: int = Field(..., ge=0, description="Distinct registered users")
    total_volunteers: int = Field(..., ge=0, description="Distinct accepted volunteers")


# ============================================================================
# Envelopes
# ============================================================================


class EventCreatedResponse(BaseModel):
    message: str
    event: EventResponse


class OrganizerEventListResponse(BaseModel):
    events: List[OrganizerEventResponse]


class EventDetailEnvelope(BaseModel):
    success: bool = True
    data: EventResponse


class EventReportEnvelope(BaseModel):
    success: bool = True
    data: EventReportResponse


class EventUpdatedResponse(BaseModel):
    success: bool = True
    message: str
    data: EventResponse


class EventDeletedResponse(BaseModel):
    success: bool = True
    message: str
