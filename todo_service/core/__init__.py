# todo_service/core/__init__.py
"""
Core module - configuration, logging, errors and payload validation.
"""
from .config import Settings, get_settings
from .exceptions import (
    TodoServiceError,
    TodoValidationError,
    TodoNotFoundError,
    StoreError,
)
from .logging import log, log_section

__all__ = [
    "Settings",
    "get_settings",
    "TodoServiceError",
    "TodoValidationError",
    "TodoNotFoundError",
    "StoreError",
    "log",
    "log_section",
]
