# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - Todo: A single todo record as stored and returned to clients
# - TodoCreate: Input for creating a new todo
# - TodoUpdate: Input for replacing a todo's mutable fields
# - TodoConfirmation: The {message, details} payload of mutating operations
#
# The JSON field for the checked flag is "isChecked" (what the browser
# client sends and expects); Python code uses is_checked.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


TEXT_MIN_LENGTH = 3
TEXT_MAX_LENGTH = 100

# Confirmation messages returned by the service
CREATED_MESSAGE = "This action added a new todo"
CLEARED_MESSAGE = "This action deleted all todos"


def updated_message(todo_id: int) -> str:
    return f"This action updated a #{todo_id} todo"


def removed_message(todo_id: int) -> str:
    return f"This action removed a #{todo_id} todo"


class Todo(BaseModel):
    """
    A single todo item.

    The id is assigned by the store and never changes afterwards.

    Example:
        {
            "id": 1,
            "text": "Buy milk",
            "isChecked": false
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Assigned by TodoStore.issue_id()
    id: int = Field(
        ...,
        ge=1,
        description="Unique todo identifier"
    )

    text: str = Field(
        ...,
        description="What needs to be done"
    )

    is_checked: bool = Field(
        default=False,
        alias="isChecked",
        description="Whether the todo has been completed"
    )


class TodoCreate(BaseModel):
    """
    Schema for creating a new todo.

    Example:
        {
            "text": "Buy milk"
        }
    """

    text: str = Field(
        ...,
        description=f"Todo text ({TEXT_MIN_LENGTH}-{TEXT_MAX_LENGTH} characters)",
        json_schema_extra={"example": "Buy milk"},
    )

    @field_validator("text", mode="before")
    @classmethod
    def validate_text(cls, value: Any) -> str:
        """
        Reject non-strings and text outside the allowed length.

        Length is counted in Unicode code points, so an emoji counts as one
        character ("\U0001F600\U0001F600" is 2 characters and too short).
        """
        if not isinstance(value, str):
            raise ValueError("Todo text must be a string")
        if len(value) < TEXT_MIN_LENGTH:
            raise ValueError(
                f"Todo text must be at least {TEXT_MIN_LENGTH} characters long"
            )
        if len(value) > TEXT_MAX_LENGTH:
            raise ValueError(
                f"Todo text must not exceed {TEXT_MAX_LENGTH} characters"
            )
        return value


class TodoUpdate(TodoCreate):
    """
    Schema for updating a todo.

    Both fields are required: an update replaces the todo's text and
    checked flag together.

    Example:
        {
            "text": "Buy milk",
            "isChecked": true
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    is_checked: bool = Field(
        ...,
        alias="isChecked",
        description="New checked state"
    )

    @field_validator("is_checked", mode="before")
    @classmethod
    def validate_is_checked(cls, value: Any) -> bool:
        # Only real booleans; "true" or 1 are rejected
        if not isinstance(value, bool):
            raise ValueError("isChecked must be a boolean value")
        return value


class TodoConfirmation(BaseModel):
    """
    Confirmation payload returned by create and update.

    Example:
        {
            "message": "This action added a new todo",
            "details": {"id": 1, "text": "Buy milk", "isChecked": false}
        }
    """

    message: str = Field(
        ...,
        description="Human-readable confirmation"
    )

    details: Todo = Field(
        ...,
        description="The todo as it is now stored"
    )
