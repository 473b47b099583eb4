"""Pytest fixtures for the Storefront service tests."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.orders.services import get_order_service
from apps.products.services import get_product_service


@pytest.fixture
def api_client():
    """DRF test client talking to the all-in-one URL configuration."""
    return APIClient()


@pytest.fixture
def product_service(db):
    return get_product_service()


@pytest.fixture
def order_service(db):
    return get_order_service()


@pytest.fixture
def make_product(product_service):
    """Create a product through the service, with overridable defaults."""
    def _make_product(**overrides):
        data = {
            "name": "Test Product",
            "description": "Test Description",
            "price": Decimal("99.99"),
            "stock": 10,
            "category": "Electronics",
        }
        data.update(overrides)
        return product_service.create_product(data)

    return _make_product


@pytest.fixture
def make_order(order_service):
    """Create an order through the service, with overridable defaults."""
    def _make_order(**overrides):
        data = {
            "product_id": 1,
            "quantity": 2,
            "total_amount": Decimal("199.98"),
            "customer_email": "test@example.com",
            "customer_name": "John Doe",
            "shipping_address": "123 Main St, City, Country",
        }
        data.update(overrides)
        return order_service.create_order(data)

    return _make_order
