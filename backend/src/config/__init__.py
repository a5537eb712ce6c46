"""
Configuration module for the EventDesk backend.

Provides centralized settings for JWT verification and CORS.
"""

from backend.src.config.settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
]
