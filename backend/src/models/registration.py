"""
Registration model.

A registration records a user's intent to attend an event. Registrations are
owned by their event and are deleted with it.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint

from backend.src.models import Base


class Registration(Base):
    """
    Attendee registration for an event.

    Attributes:
        id: Primary key
        event_id: Foreign key to events (CASCADE on delete)
        user_id: Registering user's id
        registered_at: Registration timestamp

    Constraints:
        - A user registers at most once per event
    """

    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Integer, nullable=False)
    registered_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_registrations_event_user"),
    )

    def __repr__(self) -> str:
        return f"<Registration(event_id={self.event_id}, user_id={self.user_id})>"
