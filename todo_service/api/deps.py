# todo_service/api/deps.py
from fastapi import Request

from todo_service.db.store import TodoStore


def get_store(request: Request) -> TodoStore:
    """The process-wide store created in the application lifespan."""
    return request.app.state.store


async def enforce_rate_limit(request: Request) -> None:
    """
    Apply the app's default slowapi limit to the matched route.

    Raises RateLimitExceeded, rendered as 429 by slowapi's handler. A disabled
    limiter returns without counting.
    """
    limiter = request.app.state.limiter
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)
