"""
pytest configuration and fixtures for the record store test suite.

Stores are built with a deterministic id factory so assertions can name
ids directly; applications are built with ``create_app`` around those
stores so every test gets an isolated, empty collection.
"""

import itertools

import pytest
from fastapi.testclient import TestClient

from record_store_api.app.core.config import Settings
from record_store_api.app.main import create_app
from record_store_api.app.services.profiles import PRODUCT_PROFILE, USER_PROFILE
from record_store_api.app.services.record_store import RecordStore


def sequential_ids(prefix: str = "id"):
    """Return an id factory producing ``id1``, ``id2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def user_store():
    return RecordStore(USER_PROFILE, id_factory=sequential_ids("u"))


@pytest.fixture
def product_store():
    return RecordStore(PRODUCT_PROFILE, id_factory=sequential_ids("p"))


@pytest.fixture
def phone():
    return {
        "name": "  Smartphone X ",
        "category": "Electronics",
        "description": "128GB, black",
        "price": 89990,
        "stock": 10,
    }


@pytest.fixture
def user_client(user_store):
    app = create_app(Settings(record_type="users"), store=user_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def product_client(product_store):
    app = create_app(Settings(record_type="products"), store=product_store)
    with TestClient(app) as client:
        yield client
