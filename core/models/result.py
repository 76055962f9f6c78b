# =============================================================================
# core/models/result.py - Operation Results
# =============================================================================
# Service operations that can miss (get, update, delete) return either their
# success value or a TodoNotFound. Callers check with isinstance() and
# decide how to surface the failure (the API turns it into a 404).
# =============================================================================

from dataclasses import dataclass
from typing import TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class TodoNotFound:
    """No todo has the requested id (never assigned, or already deleted)."""

    todo_id: int

    @property
    def message(self) -> str:
        return f"Todo with id {self.todo_id} not found"


# Success value or tagged failure
TodoResult = Union[T, TodoNotFound]

