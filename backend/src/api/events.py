"""
Events API endpoints for managing organizer events.

Provides endpoints for:
- Creating events
- Listing the authenticated organizer's events with participant counts
- Getting event details
- Getting the attendee/volunteer report of an event
- Replacing events (PUT and PATCH both perform a full replace)
- Deleting events together with their registrations and volunteer applications

Design:
- Uses dependency injection for services
- The organizer for listing is taken from the verified token only
- Service exceptions are mapped to HTTP status codes; store failures are
  logged and returned as sanitized 500 errors
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.src.db.database import get_db
from backend.src.middleware.auth import OrganizerContext, require_auth
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
from backend.src.services.event_service import EventService
from backend.src.services.exceptions import NotFoundError, ValidationError
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")

router = APIRouter(
    prefix="/events",
    tags=["Events"],
)

EVENT_NOT_FOUND = "Event not found"


# ============================================================================
# Dependencies
# ============================================================================


def get_event_service(db: Session = Depends(get_db)) -> EventService:
    """Create EventService instance with database session."""
    return EventService(db=db)


# ============================================================================
# API Endpoints
# ============================================================================


@router.post(
    "",
    response_model=EventCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event",
    description="Create a new event with the next sequential identifier",
)
async def create_event(
    event_data: EventCreate,
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> EventCreatedResponse:
    """
    Create a new event.

    Request Body:
        name, date, venue, category, created_by, deadline (required)
        description, max_participants (optional)

    Returns:
        201 with {"message", "event"}

    Raises:
        400: Missing required fields or deadline not in the future
        500: Store failure

    Example:
        POST /api/events
        {
          "name": "Beach Cleanup",
          "date": "2026-11-20",
          "venue": "North Pier",
          "category": "Community",
          "created_by": 7,
          "deadline": "2026-11-15T18:00:00Z"
        }
    """
    try:
        event = event_service.create(
            name=event_data.name,
            description=event_data.description,
            date=event_data.date,
            venue=event_data.venue,
            category=event_data.category,
            created_by=event_data.created_by,
            deadline=event_data.deadline,
            max_participants=event_data.max_participants,
        )

        logger.info(
            f"Created event: {event.event_id}",
            extra={"organizer_id": organizer.user_id, "organizer_email": organizer.email},
        )

        return EventCreatedResponse(
            message="Event created successfully",
            event=EventResponse.model_validate(event),
        )

    except ValidationError as e:
        logger.warning(f"Event validation failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    except Exception as e:
        logger.error(f"Create Event Error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Event creation failed",
        )


@router.get(
    "",
    response_model=OrganizerEventListResponse,
    summary="List organizer events",
    description="List the authenticated organizer's events with registration and volunteer counts",
)
async def list_organizer_events(
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> OrganizerEventListResponse:
    """
    List events created by the authenticated organizer, ordered by date.

    Returns:
        {"events": [...]} where each event carries reg_count and vol_count
    """
    try:
        rows = event_service.list_for_organizer(organizer)

        logger.info(
            f"Listed {len(rows)} events",
            extra={"organizer_id": organizer.user_id, "organizer_email": organizer.email},
        )

        return OrganizerEventListResponse(
            events=[
                OrganizerEventResponse(
                    **dict(EventResponse.model_validate(event)),
                    reg_count=reg_count,
                    vol_count=vol_count,
                )
                for event, reg_count, vol_count in rows
            ]
        )

    except Exception as e:
        logger.error(f"Fetch Events Error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch events",
        )


@router.get(
    "/{event_id}/report",
    response_model=EventReportEnvelope,
    summary="Get event report",
    description="Get total attendees and accepted volunteers of an event",
)
async def get_event_report(
    event_id: int,
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> EventReportEnvelope:
    """
    Get the attendance summary of an event.

    Returns:
        {"success": true, "data": {"total_attendees", "total_volunteers"}}

    Raises:
        404: Event not found
    """
    try:
        report = event_service.get_report(event_id)
        return EventReportEnvelope(data=EventReportResponse(**report))

    except NotFoundError:
        logger.warning(f"Event not found for report: {event_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EVENT_NOT_FOUND,
        )

    except Exception as e:
        logger.error(f"Error generating event report: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate report",
        )


@router.get(
    "/{event_id}",
    response_model=EventDetailEnvelope,
    summary="Get event",
    description="Get a single event by identifier",
)
async def get_event(
    event_id: int,
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> EventDetailEnvelope:
    """
    Get event by identifier.

    Raises:
        404: Event not found
    """
    try:
        event = event_service.get_by_id(event_id)
        return EventDetailEnvelope(data=EventResponse.model_validate(event))

    except NotFoundError:
        logger.warning(f"Event not found: {event_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EVENT_NOT_FOUND,
        )

    except Exception as e:
        logger.error(f"Error fetching event {event_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.put(
    "/{event_id}",
    response_model=EventUpdatedResponse,
    summary="Replace event",
    description="Replace every mutable field of an event",
)
@router.patch(
    "/{event_id}",
    response_model=EventUpdatedResponse,
    summary="Replace event",
    description="Same full-replace semantics as PUT; omitted fields are reset",
)
async def update_event(
    event_id: int,
    event_update: EventUpdate,
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> EventUpdatedResponse:
    """
    Replace an event.

    Omitted description and max_participants are reset to "" and 100.

    Raises:
        400: Missing required fields
        404: Event not found
    """
    try:
        event = event_service.update(
            event_id=event_id,
            name=event_update.name,
            description=event_update.description,
            date=event_update.date,
            venue=event_update.venue,
            category=event_update.category,
            deadline=event_update.deadline,
            max_participants=event_update.max_participants,
        )

        logger.info(
            f"Updated event: {event_id}",
            extra={"organizer_id": organizer.user_id, "organizer_email": organizer.email},
        )

        return EventUpdatedResponse(
            message="Event updated successfully",
            data=EventResponse.model_validate(event),
        )

    except NotFoundError:
        logger.warning(f"Event not found for update: {event_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EVENT_NOT_FOUND,
        )

    except ValidationError as e:
        logger.warning(f"Event update validation failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    except Exception as e:
        logger.error(f"Update Event Error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update event",
        )


@router.delete(
    "/{event_id}",
    response_model=EventDeletedResponse,
    summary="Delete event",
    description="Delete an event with its registrations and volunteer applications",
)
async def delete_event(
    event_id: int,
    organizer: OrganizerContext = Depends(require_auth),
    event_service: EventService = Depends(get_event_service),
) -> EventDeletedResponse:
    """
    Delete an event and everything that references it.

    Raises:
        404: Event not found (also on a repeated delete)
    """
    try:
        event_service.delete(event_id)

        logger.info(
            f"Deleted event: {event_id}",
            extra={"organizer_id": organizer.user_id, "organizer_email": organizer.email},
        )

        return EventDeletedResponse(message="Event deleted successfully")

    except NotFoundError:
        logger.warning(f"Event not found for deletion: {event_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EVENT_NOT_FOUND,
        )

    except Exception as e:
        logger.error(f"Delete Event Error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete event",
        )
