"""Core utilities for the todo store.

This module exports commonly used utilities for easy importing:
    from todo_store.core import get_logger
"""

from todo_store.core.logger import bind_contextvars, clear_contextvars, get_logger

__all__ = [
    "get_logger",
    "bind_contextvars",
    "clear_contextvars",
]
