# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The TodoStore lives on app.state and is created by create_app(), so its
# lifetime is the application instance (one per process, one per test).
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.models.result import TodoNotFound, TodoResult
from core.services.todo_service import TodoService
from core.store import TodoStore
from app.exceptions import TodoNotFoundError


def get_todo_store(request: Request) -> TodoStore:
    """Return the store owned by the running application."""
    return request.app.state.todo_store


def get_todo_service(
    store: Annotated[TodoStore, Depends(get_todo_store)],
) -> TodoService:
    """Build a TodoService around the application's store."""
    return TodoService(store)


def unwrap(result: TodoResult):
    """
    Return a service result's value, or raise TodoNotFoundError.

    The exception handler turns TodoNotFoundError into a 404 response.
    """
    if isinstance(result, TodoNotFound):
        raise TodoNotFoundError(result.todo_id)
    return result


# Type aliases for dependency injection
TodoStoreDep = Annotated[TodoStore, Depends(get_todo_store)]
TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
