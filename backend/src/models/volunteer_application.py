"""
Volunteer application model.

Volunteer applications are owned by their event and are deleted with it.
Only accepted applications count towards an event's volunteer total.
"""

import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint

from backend.src.models import Base


class VolunteerApplicationStatus(enum.Enum):
    """Review state of a volunteer application."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class VolunteerApplication(Base):
    """
    Volunteer application for an event.

    Attributes:
        id: Primary key
        event_id: Foreign key to events (CASCADE on delete)
        user_id: Applying user's id
        status: Review state (pending, accepted, rejected)
        applied_at: Application timestamp

    Constraints:
        - A user applies at most once per event
    """

    __tablename__ = "volunteer_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Integer, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=VolunteerApplicationStatus.PENDING.value
    )
    applied_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_volunteer_applications_event_user"),
    )

    def __repr__(self) -> str:
        return (
            f"<VolunteerApplication("
            f"event_id={self.event_id}, "
            f"user_id={self.user_id}, "
            f"status='{self.status}'"
            f")>"
        )
