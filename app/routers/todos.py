# =============================================================================
# app/routers/todos.py - Todo CRUD Endpoints
# =============================================================================
# Maps HTTP verbs on /todos to TodoService calls.
# Request bodies are validated by the TodoCreate/TodoUpdate models before
# the service is invoked; missing ids come back from the service as
# TodoNotFound and are raised as TodoNotFoundError (404).
#
# Handlers are plain def: FastAPI runs them in its threadpool, so waiting on
# the store lock never blocks the event loop.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, status

from app.dependencies import TodoServiceDep, unwrap
from core.models.todo import Todo, TodoConfirmation, TodoCreate, TodoUpdate

router = APIRouter()

TodoId = Annotated[int, Path(description="Todo id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=TodoConfirmation,
    status_code=status.HTTP_201_CREATED,
)
def create_todo(request: TodoCreate, service: TodoServiceDep):
    """
    Create a new todo.

    The todo starts unchecked and gets the next id.
    """
    return service.create(request.text)


@router.get("", response_model=list[Todo])
def list_todos(service: TodoServiceDep):
    """
    List all todos in the order they were created.
    """
    return service.list()


@router.get("/{todo_id}", response_model=Todo)
def get_todo(todo_id: TodoId, service: TodoServiceDep):
    """Get a single todo."""
    return unwrap(service.get(todo_id))


@router.patch("/{todo_id}", response_model=TodoConfirmation)
def update_todo(todo_id: TodoId, request: TodoUpdate, service: TodoServiceDep):
    """
    Update a todo's text and checked state.

    Returns the todo as stored after the update.
    """
    return unwrap(service.update(todo_id, request))


@router.delete("/{todo_id}", response_model=str)
def delete_todo(todo_id: TodoId, service: TodoServiceDep):
    """Delete a single todo."""
    return unwrap(service.delete(todo_id))


@router.delete("", response_model=str)
def clear_todos(service: TodoServiceDep):
    """
    Delete all todos.

    Ids are not reused afterwards: the next todo continues the sequence.
    """
    return service.clear()
