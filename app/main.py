# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Todo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    TodoAppException,
    todo_app_exception_handler,
    validation_exception_handler,
)
from app.routers import health, todos
from core.store import TodoStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Todos live only in process memory; shutdown reports how many are dropped.
    """
    logger.info(f"Starting Todo API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info(f"Shutting down Todo API, discarding {len(app.state.todo_store)} todos")


def create_app(store: TodoStore | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store to serve; a fresh empty one is created if omitted

    Returns:
        Configured FastAPI app with its own TodoStore on app.state
    """
    app = FastAPI(
        title="Todo API",
        description="""
## In-Memory Todo List API

Create, list, update, and delete todo items. Todos are kept in memory
for the lifetime of the server process.

### Quick Start

```bash
# Create a todo
curl -X POST http://localhost:3000/todos \\
  -H "Content-Type: application/json" \\
  -d '{"text": "Buy milk"}'

# Check it off
curl -X PATCH http://localhost:3000/todos/1 \\
  -H "Content-Type: application/json" \\
  -d '{"text": "Buy milk", "isChecked": true}'

# List todos
curl http://localhost:3000/todos
```
""",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Todos",
                "description": "Create, read, update, and delete todos",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    app.state.todo_store = store if store is not None else TodoStore()

    # =========================================================================
    # Middleware
    # =========================================================================

    # CORS middleware - lets the browser client call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.cors_methods_list,
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TodoAppException, todo_app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        todos.router,
        prefix="/todos",
        tags=["Todos"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Todo API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
