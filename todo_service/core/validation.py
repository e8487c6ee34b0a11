# todo_service/core/validation.py
"""
Create-payload validation.

The check runs before any Todo is constructed and reports its outcome as a
value, so callers never build a document from an unchecked payload.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

TEXT_REQUIRED = "Text is required"


@dataclass(frozen=True)
class TodoDraft:
    """A payload that passed validation."""
    text: str


@dataclass(frozen=True)
class ValidationFailure:
    """A payload that was rejected, with the client-facing message."""
    error: str


ValidationResult = Union[TodoDraft, ValidationFailure]


def validate_new_todo(payload: Optional[Mapping[str, Any]]) -> ValidationResult:
    """
    Check that the payload carries a non-empty ``text``.

    Only presence is checked: whitespace-only text is accepted.
    """
    if not payload:
        return ValidationFailure(TEXT_REQUIRED)

    text = payload.get("text")
    if not isinstance(text, str) or not text:
        return ValidationFailure(TEXT_REQUIRED)

    return TodoDraft(text=text)
