"""
Middleware components for the EventDesk backend.

This module provides:
- OrganizerContext: The authenticated organizer behind a request
- require_auth: FastAPI dependency that requires an authenticated organizer
"""

from backend.src.middleware.auth import OrganizerContext, get_organizer_context, require_auth

__all__ = [
    "OrganizerContext",
    "get_organizer_context",
    "require_auth",
]
