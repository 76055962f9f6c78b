# =============================================================================
# core/services/todo_service.py - Todo Business Logic
# =============================================================================
# Handles todo CRUD operations on top of a TodoStore.
# Separates HTTP concerns from store/business logic.
#
# Operations that target a single id return TodoNotFound instead of raising
# when the id doesn't exist. Records handed back to callers are copies, so
# the store stays the only owner of its todos.
# =============================================================================

import logging

from core.models.result import TodoNotFound, TodoResult
from core.models.todo import (
    CLEARED_MESSAGE,
    CREATED_MESSAGE,
    Todo,
    TodoConfirmation,
    TodoUpdate,
    removed_message,
    updated_message,
)
from core.store import TodoStore

logger = logging.getLogger(__name__)


class TodoService:
    """
    Service for todo management operations.

    Provides a clean interface between API routes and the store.
    """

    def __init__(self, store: TodoStore):
        self.store = store

    def create(self, text: str) -> TodoConfirmation:
        """
        Create a new unchecked todo.

        Args:
            text: The todo text (already validated by the caller)

        Returns:
            Confirmation with the created todo
        """
        with self.store.lock:
            todo = Todo(id=self.store.issue_id(), text=text, is_checked=False)
            self.store.append(todo)
            created = todo.model_copy()

        logger.info(f"Created todo: {created.id}")
        return TodoConfirmation(message=CREATED_MESSAGE, details=created)

    def list(self) -> list[Todo]:
        """Return all todos in insertion order (empty list if none)."""
        with self.store.lock:
            return [todo.model_copy() for todo in self.store.all()]

    def get(self, todo_id: int) -> TodoResult[Todo]:
        """
        Get a todo by id.

        Returns:
            The todo, or TodoNotFound if no todo has this id
        """
        with self.store.lock:
            todo = self.store.find_by_id(todo_id)
            if todo is None:
                return TodoNotFound(todo_id)
            return todo.model_copy()

    def update(self, todo_id: int, patch: TodoUpdate) -> TodoResult[TodoConfirmation]:
        """
        Replace a todo's text and checked flag. The id is preserved.

        Args:
            todo_id: The todo to update
            patch: New text and checked state

        Returns:
            Confirmation with the todo as now stored, or TodoNotFound
        """
        with self.store.lock:
            todo = self.store.find_by_id(todo_id)
            if todo is None:
                logger.warning(f"Update of missing todo: {todo_id}")
                return TodoNotFound(todo_id)

            todo.text = patch.text
            todo.is_checked = patch.is_checked
            updated = todo.model_copy()

        logger.info(f"Updated todo: {todo_id} (checked={updated.is_checked})")
        return TodoConfirmation(message=updated_message(todo_id), details=updated)

    def delete(self, todo_id: int) -> TodoResult[str]:
        """
        Remove a single todo.

        Returns:
            Confirmation message naming the id, or TodoNotFound
        """
        with self.store.lock:
            index = self.store.find_index_by_id(todo_id)
            if index is None:
                logger.warning(f"Delete of missing todo: {todo_id}")
                return TodoNotFound(todo_id)
            self.store.remove_at(index)

        logger.info(f"Deleted todo: {todo_id}")
        return removed_message(todo_id)

    def clear(self) -> str:
        """Remove every todo. The id counter is not reset."""
        with self.store.lock:
            removed = self.store.clear_all()

        logger.info(f"Cleared all todos ({removed} removed)")
        return CLEARED_MESSAGE
