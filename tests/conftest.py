"""Shared fixtures: an isolated product store, the service on top of it and an HTTP client."""

import uuid

import pytest
from fastapi.testclient import TestClient

from northwind_api.app.core.db import AppDbContext
from northwind_api.app.main import create_app
from northwind_api.app.repositories.product_repository import InMemoryProductRepository
from northwind_api.app.services.product_service import ProductService


@pytest.fixture
def store_name() -> str:
    """A store name no other test uses."""
    return f"test-{uuid.uuid4().hex}"


@pytest.fixture
def context(store_name):
    """Open an empty in-memory product store and close it afterwards."""
    ctx = AppDbContext(store_name)
    yield ctx
    ctx.close()


@pytest.fixture
def repository(context):
    return InMemoryProductRepository(context)


@pytest.fixture
def service(repository):
    return ProductService(repository)


@pytest.fixture(name="client")
def client_fixture(service):
    """Create a test client for an app wired to the test store."""
    return TestClient(create_app(product_service=service))


@pytest.fixture
def sample_products():
    return [
        {"id": 1, "name": "Chai", "price": 18.0},
        {"id": 2, "name": "Chang", "price": 19.0},
        {"id": 3, "name": "Aniseed Syrup", "price": 10.0},
    ]
