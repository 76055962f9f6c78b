# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TodoAppException(Exception):
    """
    Base exception for the Todo API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "TODO_APP_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "message": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Todo Exceptions
# =============================================================================

class TodoNotFoundError(TodoAppException):
    """Raised when a todo ID doesn't exist."""

    def __init__(self, todo_id: int):
        super().__init__(
            message=f"Todo with id {todo_id} not found",
            code="TODO_NOT_FOUND",
            status_code=404,
            suggestion="List todos with GET /todos to see the ids that exist",
            details={"todo_id": todo_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def todo_app_exception_handler(
    request: Request,
    exc: TodoAppException
) -> JSONResponse:
    """
    Convert TodoAppException to JSON response.

    Returns structured error with:
    - detail, message: Human-readable message (the browser client reads message)
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into {field, message} pairs."""
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            # loc is ("body", <offset>) for unparseable JSON
            field = "body"
        else:
            field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        # Custom validators raise ValueError; show their text without the
        # "Value error, " prefix pydantic adds to msg
        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error else error.get("msg", "Invalid value")
        errors.append({"field": field or "body", "message": message})
    return errors


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Converts validation errors to user-friendly messages. `message` joins
    them into one string for clients that show a single line.
    """
    errors = _format_validation_errors(exc)
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "message": "; ".join(error["message"] for error in errors),
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
