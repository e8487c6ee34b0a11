# todo_service/models/todo.py
from typing import Optional

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Todo(Document):
    text: str = Field(..., min_length=1)
    completed: bool = False

    class Settings:
        name = "todos"


# Pydantic models for API input/output
class TodoCreate(BaseModel):
    # Optional so a missing field reaches the presence check instead of a 422
    text: Optional[str] = Field(default=None, examples=["buy milk"])

    model_config = ConfigDict(extra="ignore")

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        # Numbers are stored as their string form; any other non-string counts as missing
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None
        if isinstance(value, str):
            return value
        return str(value) if value else None


class TodoOut(BaseModel):
    id: str = Field(..., examples=["65f1c2a9e4b0a1b2c3d4e5f6"])
    text: str
    completed: bool

    @classmethod
    def from_document(cls, todo: Todo) -> "TodoOut":
        return cls(id=str(todo.id), text=todo.text, completed=todo.completed)


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
