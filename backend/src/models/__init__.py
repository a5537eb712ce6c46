"""
SQLAlchemy models for the EventDesk application.

This module provides the declarative base class and imports all models
to ensure they are registered with SQLAlchemy's metadata.
"""

from sqlalchemy.orm import declarative_base

# All models inherit from this Base class
Base = declarative_base()


# Import all models here so they are registered with Base.metadata
# This is required for Alembic autogenerate to detect models
from backend.src.models.event import Event, DEFAULT_MAX_PARTICIPANTS
from backend.src.models.registration import Registration
from backend.src.models.volunteer_application import (
    VolunteerApplication,
    VolunteerApplicationStatus,
)

__all__ = [
    "Base",
    "Event",
    "DEFAULT_MAX_PARTICIPANTS",
    "Registration",
    "VolunteerApplication",
    "VolunteerApplicationStatus",
]
