# todo_service/db/__init__.py
"""
Database module.
"""
from .store import TodoStore

__all__ = ["TodoStore"]
