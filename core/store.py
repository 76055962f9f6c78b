# =============================================================================
# core/store.py - In-Memory Todo Store
# =============================================================================
# Holds the authoritative ordered list of todos and the next-id counter.
# Only TodoService talks to the store.
#
# Ids start at 1, increase by one per issued id, and are never reused:
# clear_all() empties the list but leaves the counter alone.
#
# The store does no locking per call. Callers that scan and then mutate
# (find_index_by_id followed by remove_at) hold `store.lock` across both
# steps so concurrent requests can't interleave between them.
# =============================================================================

import logging
import threading

from core.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """Ordered in-memory collection of todos plus the id counter."""

    def __init__(self, first_id: int = 1):
        if first_id < 1:
            raise ValueError(f"first_id must be at least 1, got {first_id}")
        self._todos: list[Todo] = []
        self._next_id = first_id
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._todos)

    @property
    def next_id(self) -> int:
        """The id the next call to issue_id() will return."""
        return self._next_id

    def issue_id(self) -> int:
        """Return the current counter value, then increment it."""
        todo_id = self._next_id
        self._next_id += 1
        return todo_id

    def append(self, todo: Todo) -> None:
        """Insert at the end. Id uniqueness is the caller's job."""
        self._todos.append(todo)

    def all(self) -> list[Todo]:
        """Snapshot of the stored records in insertion order."""
        return list(self._todos)

    def find_by_id(self, todo_id: int) -> Todo | None:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None

    def find_index_by_id(self, todo_id: int) -> int | None:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        return None

    def remove_at(self, index: int) -> Todo:
        """Delete one element, shifting the ones after it."""
        return self._todos.pop(index)

    def clear_all(self) -> int:
        """
        Empty the collection without resetting the id counter.

        Returns:
            Number of todos removed
        """
        removed = len(self._todos)
        self._todos.clear()
        logger.debug(f"Cleared {removed} todos, next id stays {self._next_id}")
        return removed
