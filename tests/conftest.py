"""
Shared fixtures for the shopping tests.

The product store is replaced by an autospec mock so tests can check
which products were written back, the same way the store would see them.
"""
from unittest.mock import create_autospec

import pytest

from data.product_dao import ProductDao
from models.customer import Customer
from models.product import Product
from services.shopping_service import ShoppingService


@pytest.fixture
def customer() -> Customer:
    return Customer(customer_id=1, phone="123")


@pytest.fixture
def other_customer() -> Customer:
    return Customer(customer_id=2, phone="124")


@pytest.fixture
def product_dao():
    return create_autospec(ProductDao, instance=True)


@pytest.fixture
def shopping_service(product_dao) -> ShoppingService:
    return ShoppingService(product_dao)


@pytest.fixture
def make_product():
    """Build a product with the given name and stock, sku derived from the name."""
    def _make(name: str, count: int = 0) -> Product:
        return Product(sku=f"sku-{name.lower()}", name=name, count=count)
    return _make
