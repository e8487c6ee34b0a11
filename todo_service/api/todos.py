# todo_service/api/todos.py
"""
Todo routes: list, create, toggle and delete.

Handlers raise TodoServiceError subclasses; the application's exception
handler renders them as ``{"error": message}`` with the matching status.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from todo_service.api.deps import get_store
from todo_service.core.exceptions import TodoNotFoundError, TodoValidationError
from todo_service.core.logging import log
from todo_service.core.validation import ValidationFailure, validate_new_todo
from todo_service.db.store import TodoStore
from todo_service.models.todo import ErrorOut, MessageOut, TodoCreate, TodoOut

router = APIRouter(prefix="/todos", tags=["todos"])

SERVER_ERROR = {500: {"model": ErrorOut, "description": "Database failure"}}


@router.get(
    "",
    response_model=List[TodoOut],
    summary="Get all todos",
    response_description="Every stored todo",
    responses=SERVER_ERROR,
)
async def list_todos(store: TodoStore = Depends(get_store)):
    return await store.list_todos()


@router.post(
    "",
    response_model=TodoOut,
    summary="Add a new todo",
    response_description="The created todo with its assigned id",
    responses={400: {"model": ErrorOut, "description": "Text is required"}, **SERVER_ERROR},
)
async def create_todo(
    payload: Optional[TodoCreate] = Body(default=None),
    store: TodoStore = Depends(get_store),
):
    """
    Create a todo from ``{"text": ...}``. New todos always start uncompleted.
    """
    data = payload.model_dump() if payload is not None else None
    log("TODOS", "📩 Incoming POST", data)

    result = validate_new_todo(data)
    if isinstance(result, ValidationFailure):
        raise TodoValidationError(result.error)

    todo = await store.create_todo(result.text)
    log("TODOS", f"✅ Saved todo {todo.id}", todo.model_dump())
    return todo


@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Toggle completed",
    response_description="The todo with its completed flag flipped",
    responses={404: {"model": ErrorOut, "description": "Todo not found"}, **SERVER_ERROR},
)
async def toggle_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    todo = await store.toggle_todo(todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return todo


@router.delete(
    "/{todo_id}",
    response_model=MessageOut,
    summary="Delete a todo",
    response_description="Confirmation, also returned when the todo did not exist",
    responses=SERVER_ERROR,
)
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    await store.delete_todo(todo_id)
    return MessageOut(message="Todo deleted")
