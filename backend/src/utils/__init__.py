"""
Utility modules for the EventDesk backend.

- logging_config: Named loggers with console and JSON formatters
"""

from backend.src.utils.logging_config import get_logger, init_logging

__all__ = [
    "get_logger",
    "init_logging",
]
