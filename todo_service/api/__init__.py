# todo_service/api/__init__.py
"""
API module - All route handlers.
"""
from . import health, todos

__all__ = [
    "health",
    "todos",
]
