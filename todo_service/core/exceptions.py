# todo_service/core/exceptions.py
"""
Custom exceptions for the Todo service.

Every exception carries the HTTP status it is rendered with; the API layer
turns them into an ``{"error": message}`` body.
"""
from typing import Optional, Dict, Any


class TodoServiceError(Exception):
    """Base exception for all Todo service errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TodoValidationError(TodoServiceError):
    """Client sent a payload that cannot become a Todo."""
    status_code = 400


class TodoNotFoundError(TodoServiceError):
    """No Todo exists under the requested id."""
    status_code = 404

    def __init__(self, todo_id: str):
        super().__init__("Todo not found", {"id": todo_id})
        self.todo_id = todo_id


class StoreError(TodoServiceError):
    """MongoDB is unreachable or an operation on it failed."""
    status_code = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, {"operation": operation} if operation else None)
        self.operation = operation
