# tests/test_mongo_integration.py
"""
End-to-end tests against a live MongoDB.

Uses MONGO_URL (default mongodb://127.0.0.1:27017) and a throwaway
``todos_test`` database. Skipped when no server is reachable.
"""
import os

import pytest
from httpx import ASGITransport, AsyncClient

from todo_service.api.deps import get_store
from todo_service.core.config import Settings
from todo_service.db.store import TodoStore
from todo_service.main import create_app
from todo_service.models.todo import Todo

MONGO_URL = os.getenv("MONGO_URL", "mongodb://127.0.0.1:27017")


@pytest.fixture
async def mongo_store():
    store = TodoStore(MONGO_URL, "todos_test", timeout_ms=500)
    await store.connect()
    if not store.is_connected:
        store.close()
        pytest.skip(f"MongoDB not available at {MONGO_URL}")

    await Todo.delete_all()
    yield store
    await Todo.delete_all()
    store.close()


@pytest.fixture
async def mongo_client(mongo_store):
    app = create_app(Settings(RATE_LIMIT_ENABLED=False, METRICS_ENABLED=False))
    app.dependency_overrides[get_store] = lambda: mongo_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.mark.anyio
async def test_store_round_trip(mongo_store):
    created = await mongo_store.create_todo("buy milk")
    assert created.completed is False

    toggled = await mongo_store.toggle_todo(created.id)
    assert toggled.id == created.id
    assert toggled.completed is True

    assert [todo.id for todo in await mongo_store.list_todos()] == [created.id]

    await mongo_store.delete_todo(created.id)
    assert await mongo_store.list_todos() == []


@pytest.mark.anyio
async def test_store_unknown_and_malformed_ids(mongo_store):
    assert await mongo_store.toggle_todo("507f1f77bcf86cd799439011") is None
    assert await mongo_store.toggle_todo("not-an-object-id") is None
    await mongo_store.delete_todo("507f1f77bcf86cd799439011")
    await mongo_store.delete_todo("not-an-object-id")
    assert await mongo_store.list_todos() == []


@pytest.mark.anyio
async def test_todo_lifecycle_against_mongo(mongo_client):
    response = await mongo_client.post("/todos", json={"text": "buy milk"})
    assert response.status_code == 200
    created = response.json()
    todo_id = created["id"]
    assert created == {"id": todo_id, "text": "buy milk", "completed": False}

    response = await mongo_client.put(f"/todos/{todo_id}")
    assert response.json()["completed"] is True

    listed = (await mongo_client.get("/todos")).json()
    assert listed == [{"id": todo_id, "text": "buy milk", "completed": True}]

    response = await mongo_client.delete(f"/todos/{todo_id}")
    assert response.json() == {"message": "Todo deleted"}
    assert (await mongo_client.get("/todos")).json() == []

    response = await mongo_client.put(f"/todos/{todo_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}
