"""Tests for the order service: creation, status updates and the cancel guard."""

from decimal import Decimal

import pytest

from apps.core.exceptions import InvalidTransitionError, NotFoundError
from apps.orders.models import OrderStatus

pytestmark = pytest.mark.django_db

CANCELLABLE = [
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.CANCELLED,
    OrderStatus.REFUNDED,
]
NOT_CANCELLABLE = [OrderStatus.SHIPPED, OrderStatus.DELIVERED]


class TestCreateOrder:
    def test_new_order_is_pending(self, make_order):
        order = make_order()
        assert order.id is not None
        assert order.status == OrderStatus.PENDING
        assert order.created_at is not None
        assert order.updated_at is None

    @pytest.mark.parametrize("status", [s for s in OrderStatus])
    def test_caller_status_is_ignored(self, make_order, status):
        order = make_order(status=status)
        order.refresh_from_db()
        assert order.status == OrderStatus.PENDING

    def test_stores_given_fields(self, make_order):
        order = make_order(quantity=2, total_amount=Decimal("199.98"), notes="Leave at door")
        order.refresh_from_db()
        assert order.quantity == 2
        assert order.total_amount == Decimal("199.98")
        assert order.notes == "Leave at door"
        assert order.shipping_address == "123 Main St, City, Country"


class TestReads:
    def test_orders_by_customer_newest_first(self, order_service, make_order):
        older = make_order(customer_email="a@example.com")
        make_order(customer_email="b@example.com")
        newer = make_order(customer_email="a@example.com")

        orders = order_service.get_orders_by_customer("a@example.com")

        assert [o.id for o in orders] == [newer.id, older.id]

    def test_orders_by_status(self, order_service, make_order):
        pending = make_order()
        confirmed = make_order()
        order_service.update_order_status(confirmed.id, OrderStatus.CONFIRMED)

        assert order_service.get_orders_by_status(OrderStatus.PENDING) == [pending]
        assert order_service.get_orders_by_status(OrderStatus.CONFIRMED) == [confirmed]

    def test_orders_by_product(self, order_service, make_order):
        first = make_order(product_id=1)
        make_order(product_id=2)
        assert order_service.get_orders_by_product(1) == [first]

    def test_missing_order_returns_none(self, order_service):
        assert order_service.get_order_by_id(999) is None


class TestUpdateOrderStatus:
    def test_any_status_can_be_written(self, order_service, make_order):
        order = make_order()
        order_service.update_order_status(order.id, OrderStatus.DELIVERED)

        result = order_service.update_order_status(order.id, OrderStatus.PENDING)

        assert result.ok
        assert result.value.status == OrderStatus.PENDING

    def test_sets_updated_at(self, order_service, make_order):
        order = make_order()

        result = order_service.update_order_status(order.id, OrderStatus.CONFIRMED)

        assert result.value.updated_at is not None
        order.refresh_from_db()
        assert order.status == OrderStatus.CONFIRMED
        assert order.updated_at is not None

    def test_missing_order(self, order_service):
        result = order_service.update_order_status(999, OrderStatus.CONFIRMED)
        assert isinstance(result.error, NotFoundError)
        assert result.error.entity_id == 999


class TestCancelOrder:
    @pytest.mark.parametrize("status", CANCELLABLE)
    def test_cancellable_statuses(self, order_service, make_order, status):
        order = make_order()
        order_service.update_order_status(order.id, status)

        result = order_service.cancel_order(order.id)

        assert result.ok
        order.refresh_from_db()
        assert order.status == OrderStatus.CANCELLED

    @pytest.mark.parametrize("status", NOT_CANCELLABLE)
    def test_shipped_or_delivered_is_refused(self, order_service, make_order, status):
        order = make_order()
        order_service.update_order_status(order.id, status)
        order.refresh_from_db()
        updated_at = order.updated_at

        result = order_service.cancel_order(order.id)

        assert isinstance(result.error, InvalidTransitionError)
        assert result.error.current_status == status
        order.refresh_from_db()
        assert order.status == status
        assert order.updated_at == updated_at

    def test_shipped_order_stays_shipped(self, order_service, make_order):
        order = make_order(quantity=2, total_amount=Decimal("199.98"))
        order_service.update_order_status(order.id, OrderStatus.SHIPPED)

        result = order_service.cancel_order(order.id)

        assert not result.ok
        assert result.error.current_status == "SHIPPED"
        assert order_service.get_order_by_id(order.id).status == OrderStatus.SHIPPED

    def test_cancel_sets_updated_at(self, order_service, make_order):
        order = make_order()
        result = order_service.cancel_order(order.id)
        assert result.value.updated_at is not None

    def test_missing_order(self, order_service):
        result = order_service.cancel_order(999)
        assert isinstance(result.error, NotFoundError)
