"""Shared fixtures for QueryGuard tests."""

import pytest
from fastapi.testclient import TestClient

from queryguard.main import app
from queryguard.validators import QueryValidator


@pytest.fixture
def validator():
    """A fresh validator with the default tables."""
    return QueryValidator()


@pytest.fixture
def sync_client():
    """TestClient that runs the app lifespan."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def user_rules():
    return {"age": "number", "status": "string"}
