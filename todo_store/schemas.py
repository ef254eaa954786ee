"""Pydantic schemas for todo list payloads crossing the store boundary."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmptyUpdateError(ValueError):
    """Raised when an update patch carries no fields to change."""

    def __init__(self) -> None:
        super().__init__("update structure has no values")


class TodoListCreate(BaseModel):
    """Input for creating a todo list."""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    done: bool = False


class TodoListResponse(BaseModel):
    """A stored todo list."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    done: bool


class UpdateListInput(BaseModel):
    """Partial update for a todo list.

    Each field is independently present or absent; None means absent and
    leaves the stored value untouched.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    done: bool | None = None

    def present_fields(self) -> dict[str, Any]:
        """Column name -> new value for the fields present in this patch."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None
        }

    def validate_not_empty(self) -> None:
        if not self.present_fields():
            raise EmptyUpdateError()
