"""Shared fixtures for catalog tests."""

import itertools
import os
import tempfile

import pytest

from src.models import NewProduct
from src.services import ProductStore


@pytest.fixture
def temp_db_path():
    """Create a temporary database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


@pytest.fixture
def store(temp_db_path):
    """Create a ProductStore with a temporary database."""
    product_store = ProductStore(temp_db_path)
    yield product_store
    product_store.close()


@pytest.fixture
def make_product():
    """Build NewProduct values with unique SKUs and neutral defaults."""
    counter = itertools.count(1)

    def _make(**overrides) -> NewProduct:
        values = {
            "name": "Widget",
            "description": "A test product",
            "category": "Testing",
            "brand": "Acme",
            "price": 9.99,
            "stock_quantity": 5,
            "sku": f"SKU-{next(counter):05d}",
        }
        values.update(overrides)
        return NewProduct(**values)

    return _make
