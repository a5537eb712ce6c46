"""
Authentication dependencies for API routes.

Provides:
- OrganizerContext: The authenticated organizer behind a request
- get_organizer_context: Decode the bearer token into an OrganizerContext
- require_auth: FastAPI dependency that requires authentication

Organizer identity always comes from the verified token, never from request
parameters or bodies, so ownership-scoped queries cannot be pointed at
another organizer's data.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt

from backend.src.config.settings import AppSettings, get_settings
from backend.src.utils.logging_config import get_logger


logger = get_logger("api")


@dataclass(frozen=True)
class OrganizerContext:
    """
    Represents the authenticated organizer for a request.

    Attributes:
        user_id: Organizer's user id (matches Event.created_by)
        email: Organizer's email, when the token carries one

    Usage:
        @router.get("/events")
        async def list_events(
            organizer: OrganizerContext = Depends(require_auth)
        ):
            return service.list_for_organizer(organizer)
    """

    user_id: int
    email: Optional[str] = None

    def __post_init__(self):
        """Validate required fields."""
        if not self.user_id:
            raise ValueError("user_id is required")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


def decode_organizer_token(token: str, settings: AppSettings) -> Optional[OrganizerContext]:
    """
    Verify a JWT bearer token and extract the organizer identity.

    Args:
        token: JWT token string (from Authorization header)
        settings: Application settings holding the verification key

    Returns:
        OrganizerContext if valid, None if invalid, expired or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning(f"Token validation failed: JWT error - {e}")
        return None

    try:
        return OrganizerContext(
            user_id=int(payload.get("user_id")),
            email=payload.get("email"),
        )
    except (TypeError, ValueError):
        logger.warning("Token validation failed: missing or invalid user_id claim")
        return None


async def get_organizer_context(
    request: Request,
    settings: AppSettings = Depends(get_settings),
) -> OrganizerContext:
    """
    FastAPI dependency to extract the organizer from the request.

    Raises:
        HTTPException 401: If the bearer token is missing or invalid
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise _unauthorized("Authentication required")

    if not settings.jwt_configured:
        logger.error("JWT_SECRET_KEY is not configured; rejecting bearer token")
        raise _unauthorized("Authentication required")

    organizer = decode_organizer_token(auth_header[7:], settings)
    if organizer is None:
        raise _unauthorized("Invalid or expired token")

    return organizer


async def require_auth(
    organizer: OrganizerContext = Depends(get_organizer_context)
) -> OrganizerContext:
    """
    FastAPI dependency that requires authentication.

    Thin semantic wrapper so routes read ``Depends(require_auth)`` and tests
    can override a single dependency.
    """
    return organizer


__all__ = [
    "OrganizerContext",
    "decode_organizer_token",
    "get_organizer_context",
    "require_auth",
]
