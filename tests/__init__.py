# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Todo API:
# - test_models.py: Pydantic model validation
# - test_store.py: In-memory store and id counter
# - test_todo_service.py: Service operations and results
# - test_todos_api.py: HTTP endpoints for /todos
# - test_health.py: Health check endpoints
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
