"""
Event service for managing organizer events.

Provides business logic for creating, listing, retrieving, updating and
deleting events, plus the attendee/volunteer report.

Design:
- Event identifiers are assigned as max(event_id) + 1 inside the insert
  transaction; on PostgreSQL the events table is locked for the duration so
  concurrent creations serialize. Elsewhere the primary key rejects a
  duplicate and the failure surfaces as StoreError.
- Update is a full replace: optional fields fall back to their defaults.
- Delete removes registrations, volunteer applications and the event in one
  transaction.
- Every store failure is logged and re-raised as StoreError.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy import case, distinct, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.src.db.database import transaction
from backend.src.middleware.auth import OrganizerContext
from backend.src.models import (
    DEFAULT_MAX_PARTICIPANTS,
    Event,
    Registration,
    VolunteerApplication,
    VolunteerApplicationStatus,
)
from backend.src.services.exceptions import NotFoundError, StoreError, ValidationError
from backend.src.utils.logging_config import get_logger


logger = get_logger("services")

MISSING_FIELDS_MESSAGE = "All required fields must be provided"
PAST_DEADLINE_MESSAGE = "Deadline must be a future date"


def _utcnow() -> datetime:
    return datetime.utcnow()


def _parse_iso(value: str, field: str) -> datetime:
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"Invalid {field}", field=field)


def _to_date(value: Any, field: str = "date") -> date:
    """Coerce a date, datetime or ISO string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_iso(value, field).date()
    raise ValidationError(f"Invalid {field}", field=field)


def _to_utc_datetime(value: Any, field: str = "deadline") -> datetime:
    """
    Coerce a datetime, date or ISO string to a naive UTC datetime.

    Timezone-aware values are converted to UTC; naive values are taken as UTC.
    A bare date means midnight of that day.
    """
    if isinstance(value, str):
        value = _parse_iso(value, field)
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    elif not isinstance(value, datetime):
        raise ValidationError(f"Invalid {field}", field=field)

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _resolve_max_participants(value: Optional[int]) -> int:
    if not value:
        return DEFAULT_MAX_PARTICIPANTS
    if value < 0:
        raise ValidationError(
            "max_participants must be a positive integer",
            field="max_participants",
        )
    return value


class EventService:
    """
    Service for managing organizer events.

    Usage:
        >>> service = EventService(db_session)
        >>> event = service.create(
        ...     name="Beach Cleanup",
        ...     date="2026-11-20",
        ...     venue="North Pier",
        ...     category="Community",
        ...     created_by=7,
        ...     deadline="2026-11-15T18:00:00Z",
        ... )
        >>> event.event_id
        1
    """

    def __init__(self, db: Session, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize event service.

        Args:
            db: SQLAlchemy database session
            clock: Callable returning the current naive UTC datetime
        """
        self.db = db
        self._now = clock or _utcnow

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(
        self,
        name: Optional[str],
        date: Any,
        venue: Optional[str],
        category: Optional[str],
        created_by: Optional[int],
        deadline: Any,
        description: Optional[str] = None,
        max_participants: Optional[int] = None,
    ) -> Event:
        """
        Create a new event with the next sequential identifier.

        Args:
            name: Event name
            date: Date the event takes place
            venue: Event venue
            category: Event category
            created_by: Owning organizer's user id
            deadline: Registration deadline, must be in the future
            description: Optional description (defaults to "")
            max_participants: Optional cap (defaults to 100)

        Returns:
            Created Event instance

        Raises:
            ValidationError: If a required field is missing, a value cannot
                be parsed, or the deadline is not in the future
            StoreError: If the store rejects the insert
        """
        if not all([name, date, venue, category, created_by, deadline]):
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        event_date = _to_date(date)
        deadline_at = _to_utc_datetime(deadline)
        if deadline_at <= self._now():
            raise ValidationError(PAST_DEADLINE_MESSAGE, field="deadline")

        participants = _resolve_max_participants(max_participants)

        try:
            with transaction(self.db):
                self._lock_for_id_assignment()
                event = Event(
                    event_id=self._next_event_id(),
                    name=name,
                    description=description or "",
                    date=event_date,
                    venue=venue,
                    category=category,
                    created_by=created_by,
                    deadline=deadline_at,
                    max_participants=participants,
                )
                self.db.add(event)
            self.db.refresh(event)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create event '{name}': {e}")
            raise StoreError("create event") from e

        logger.info(f"Created event: {event.name} ({event.event_id})")
        return event

    def _lock_for_id_assignment(self) -> None:
        # Blocks other writers (and other id assignments) until commit,
        # while still allowing plain reads.
        if self.db.get_bind().dialect.name == "postgresql":
            self.db.execute(text("LOCK TABLE events IN SHARE ROW EXCLUSIVE MODE"))

    def _next_event_id(self) -> int:
        max_id = self.db.query(func.max(Event.event_id)).scalar()
        return (max_id or 0) + 1

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_for_organizer(
        self, organizer: OrganizerContext
    ) -> List[Tuple[Event, int, int]]:
        """
        List the organizer's events with registration and volunteer counts.

        Args:
            organizer: Authenticated organizer (never taken from request data)

        Returns:
            List of (event, reg_count, vol_count) ordered by event date.
            Events without registrations or applications have zero counts.

        Raises:
            StoreError: If the query fails
        """
        reg_count = func.count(distinct(Registration.user_id)).label("reg_count")
        vol_count = func.count(distinct(VolunteerApplication.user_id)).label("vol_count")

        try:
            rows = (
                self.db.query(Event, reg_count, vol_count)
                .outerjoin(Registration, Registration.event_id == Event.event_id)
                .outerjoin(
                    VolunteerApplication,
                    VolunteerApplication.event_id == Event.event_id,
                )
                .filter(Event.created_by == organizer.user_id)
                .group_by(Event.event_id)
                .order_by(Event.date.asc(), Event.event_id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch events for organizer {organizer.user_id}: {e}")
            raise StoreError("fetch events for organizer", organizer.user_id) from e

        return [(event, int(regs), int(vols)) for event, regs, vols in rows]

    def get_report(self, event_id: int) -> Dict[str, int]:
        """
        Compute the attendee and volunteer totals of an event.

        The query is driven from the events table so an existing event with
        no registrations reports zeros while a missing event yields no row.

        Args:
            event_id: Event identifier

        Returns:
            {"total_attendees": int, "total_volunteers": int}; volunteers only
            count applications whose status is "accepted"

        Raises:
            NotFoundError: If the event does not exist
            StoreError: If the query fails
        """
        accepted_volunteer = case(
            (
                VolunteerApplication.status == VolunteerApplicationStatus.ACCEPTED.value,
                VolunteerApplication.user_id,
            ),
        )

        try:
            row = (
                self.db.query(
                    func.count(distinct(Registration.user_id)).label("total_attendees"),
                    func.count(distinct(accepted_volunteer)).label("total_volunteers"),
                )
                .select_from(Event)
                .outerjoin(Registration, Registration.event_id == Event.event_id)
                .outerjoin(
                    VolunteerApplication,
                    VolunteerApplication.event_id == Event.event_id,
                )
                .filter(Event.event_id == event_id)
                .group_by(Event.event_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to generate report for event {event_id}: {e}")
            raise StoreError("generate report for event", event_id) from e

        if row is None:
            raise NotFoundError("Event", event_id)

        return {
            "total_attendees": int(row.total_attendees),
            "total_volunteers": int(row.total_volunteers),
        }

    def get_by_id(self, event_id: int) -> Event:
        """
        Get an event by identifier.

        Raises:
            NotFoundError: If event not found
            StoreError: If the query fails
        """
        try:
            event = self.db.query(Event).filter(Event.event_id == event_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch event {event_id}: {e}")
            raise StoreError("fetch event", event_id) from e

        if not event:
            raise NotFoundError("Event", event_id)
        return event

    # ------------------------------------------------------------------
    # Update / delete
    # ------------------------------------------------------------------

    def update(
        self,
        event_id: int,
        name: Optional[str],
        date: Any,
        venue: Optional[str],
        category: Optional[str],
        deadline: Any,
        description: Optional[str] = None,
        max_participants: Optional[int] = None,
    ) -> Event:
        """
        Replace every mutable field of an event.

        Omitted optional fields are reset to their defaults (description "",
        max_participants 100), not left unchanged. The deadline is not checked
        against the current time so past events can be corrected.

        Args:
            event_id: Event identifier
            name: New name
            date: New event date
            venue: New venue
            category: New category
            deadline: New deadline
            description: New description (defaults to "")
            max_participants: New cap (defaults to 100)

        Returns:
            Updated Event instance

        Raises:
            NotFoundError: If event not found (nothing is changed)
            ValidationError: If a required field is missing or unparseable
            StoreError: If the store rejects the update
        """
        try:
            with transaction(self.db):
                event = self._get_for_update(event_id)

                if not all([name, date, venue, category, deadline]):
                    raise ValidationError(MISSING_FIELDS_MESSAGE)

                event.name = name
                event.description = description or ""
                event.date = _to_date(date)
                event.venue = venue
                event.category = category
                event.deadline = _to_utc_datetime(deadline)
                event.max_participants = _resolve_max_participants(max_participants)
            self.db.refresh(event)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update event {event_id}: {e}")
            raise StoreError("update event", event_id) from e

        logger.info(f"Updated event: {event.name} ({event.event_id})")
        return event

    def delete(self, event_id: int) -> None:
        """
        Delete an event together with its registrations and volunteer applications.

        All three deletions commit or roll back together.

        Raises:
            NotFoundError: If event not found, including a repeated delete
            StoreError: If any of the deletions fails
        """
        try:
            with transaction(self.db):
                event = self._get_for_update(event_id)

                registrations = (
                    self.db.query(Registration)
                    .filter(Registration.event_id == event_id)
                    .delete(synchronize_session=False)
                )
                applications = (
                    self.db.query(VolunteerApplication)
                    .filter(VolunteerApplication.event_id == event_id)
                    .delete(synchronize_session=False)
                )
                self.db.delete(event)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete event {event_id}: {e}")
            raise StoreError("delete event", event_id) from e

        logger.info(
            f"Deleted event {event_id} with {registrations} registration(s) "
            f"and {applications} volunteer application(s)"
        )

    def _get_for_update(self, event_id: int) -> Event:
        """Load an event and lock its row until the surrounding transaction ends."""
        event = (
            self.db.query(Event)
            .filter(Event.event_id == event_id)
            .with_for_update()
            .first()
        )
        if not event:
            raise NotFoundError("Event", event_id)
        return event
