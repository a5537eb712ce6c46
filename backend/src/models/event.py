"""
Event model for organizer-owned events.

Events are the aggregate root of the schema: registrations and volunteer
applications reference them and are removed together with them.

Design Rationale:
- event_id is assigned by the service as max(event_id) + 1 rather than by a
  database sequence, so the column is a plain integer primary key; the primary
  key constraint rejects duplicate identifiers from concurrent inserts
- description and max_participants carry application defaults ("" and 100)
- created_by holds the organizer's user id issued by the identity provider;
  users live outside this schema so there is no foreign key
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Index

from backend.src.models import Base


DEFAULT_MAX_PARTICIPANTS = 100


class Event(Base):
    """
    Organizer event model.

    Attributes:
        event_id: Primary key, assigned sequentially by EventService
        name: Event name
        description: Free text description (empty string when not given)
        date: Date the event takes place
        venue: Where the event takes place
        category: Free-form category label
        created_by: User id of the owning organizer
        deadline: Registration deadline (naive UTC)
        max_participants: Participant cap (defaults to 100)
        created_at: Creation timestamp
        updated_at: Last update timestamp

    Indexes:
        - created_by, date (organizer listing ordered by date)
    """

    __tablename__ = "events"

    event_id = Column(Integer, primary_key=True, autoincrement=False)

    # Core fields
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    date = Column(Date, nullable=False)
    venue = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)

    # Ownership
    created_by = Column(Integer, nullable=False, index=True)

    # Registration window and capacity
    deadline = Column(DateTime, nullable=False)
    max_participants = Column(
        Integer, nullable=False, default=DEFAULT_MAX_PARTICIPANTS
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    __table_args__ = (
        Index("ix_events_created_by_date", "created_by", "date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Event("
            f"event_id={self.event_id}, "
            f"name='{self.name}', "
            f"date={self.date}"
            f")>"
        )

    def __str__(self) -> str:
        return self.name
