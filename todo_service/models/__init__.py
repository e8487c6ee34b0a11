from .todo import Todo, TodoCreate, TodoOut, MessageOut, ErrorOut

__all__ = ["Todo", "TodoCreate", "TodoOut", "MessageOut", "ErrorOut"]
