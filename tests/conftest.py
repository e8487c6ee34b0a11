# tests/conftest.py
"""
Shared pytest fixtures for the Todo service tests.

Provides:
- An in-memory stand-in for TodoStore, injected through FastAPI dependency overrides
- An application built with rate limiting and metrics switched off
- An async HTTP client over ASGITransport
"""
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from todo_service.api.deps import get_store
from todo_service.core.config import Settings
from todo_service.core.exceptions import StoreError
from todo_service.main import create_app
from todo_service.models.todo import TodoOut


# ═══════════════════════════════════════════════════════
# MOCK STORE
# ═══════════════════════════════════════════════════════

class InMemoryTodoStore:
    """Implements the TodoStore operations over a dict."""

    def __init__(self):
        self.todos: Dict[str, TodoOut] = {}
        self.is_connected = True
        self.failure: Optional[str] = None

    def _check(self, operation: str) -> None:
        if self.failure:
            raise StoreError(self.failure, operation)

    async def list_todos(self) -> List[TodoOut]:
        self._check("list")
        return list(self.todos.values())

    async def create_todo(self, text: str) -> TodoOut:
        self._check("create")
        todo = TodoOut(id=str(ObjectId()), text=text, completed=False)
        self.todos[todo.id] = todo
        return todo

    async def toggle_todo(self, todo_id: str) -> Optional[TodoOut]:
        self._check("toggle")
        todo = self.todos.get(todo_id)
        if todo is None:
            return None
        updated = todo.model_copy(update={"completed": not todo.completed})
        self.todos[todo_id] = updated
        return updated

    async def delete_todo(self, todo_id: str) -> None:
        self._check("delete")
        self.todos.pop(todo_id, None)


# ═══════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(RATE_LIMIT_ENABLED=False, METRICS_ENABLED=False)


@pytest.fixture
def store():
    return InMemoryTodoStore()


@pytest.fixture
def app(settings, store):
    application = create_app(settings)
    application.dependency_overrides[get_store] = lambda: store
    return application


@pytest.fixture
async def async_client(app):
    """Async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def client(async_client):
    """Alias for async_client - use either name in tests."""
    return async_client
