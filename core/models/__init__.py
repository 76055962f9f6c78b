# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains the schemas shared by the service and the API:
# - todo.py: Todo record, create/update inputs, confirmation payload
# - result.py: TodoNotFound and the TodoResult alias
#
# These models define the "contract" between API and clients.
# =============================================================================

from .todo import (
    Todo,
    TodoConfirmation,
    TodoCreate,
    TodoUpdate,
)
from .result import (
    TodoNotFound,
    TodoResult,
)

__all__ = [
    # Todo
    "Todo",
    "TodoConfirmation",
    "TodoCreate",
    "TodoUpdate",
    # Results
    "TodoNotFound",
    "TodoResult",
]
