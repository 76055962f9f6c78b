# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own TodoStore, so no state leaks between tests
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.services.todo_service import TodoService
from core.store import TodoStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Fresh, empty todo store."""
    return TodoStore()


@pytest.fixture
def service(store):
    """TodoService bound to the test's store."""
    return TodoService(store)


@pytest.fixture
def app(store):
    """FastAPI app serving the test's store."""
    return create_app(store=store)


@pytest.fixture
def client(app):
    """HTTP client for the test app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_texts():
    """Todo texts that pass validation."""
    return ["Buy milk", "Walk dog", "Pay rent"]
