"""
Order Service - order creation and lifecycle

Status model: any status may be written through ``update_order_status``;
``cancel_order`` is the one guarded transition and refuses orders that are
already SHIPPED or DELIVERED.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import transaction

from apps.core.exceptions import NotFoundError, InvalidTransitionError
from apps.core.results import Result
from apps.core.utils import mask_email
from .models import Order, OrderStatus
from .store import OrderStore

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business operations on orders. The store is injected through the
    constructor.
    """

    def __init__(self, store: OrderStore):
        self.store = store

    def get_all_orders(self) -> List[Order]:
        logger.info("Fetching all orders")
        return self.store.find_all()

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        logger.info(f"Fetching order with id: {order_id}")
        return self.store.find_by_id(order_id)

    def get_orders_by_customer(self, email: str) -> List[Order]:
        logger.info(f"Fetching orders for customer: {mask_email(email)}")
        return self.store.find_by_customer_email(email)

    def get_orders_by_status(self, status: str) -> List[Order]:
        logger.info(f"Fetching orders with status: {status}")
        return self.store.find_by_status(status)

    def get_orders_by_product(self, product_id: int) -> List[Order]:
        logger.info(f"Fetching orders for product id: {product_id}")
        return self.store.find_by_product_id(product_id)

    @transaction.atomic
    def create_order(self, data: Dict[str, Any]) -> Order:
        """
        Create an order. Any status in ``data`` is ignored: new orders are
        always PENDING.
        """
        logger.info(
            f"Creating order for customer: {mask_email(data.get('customer_email'))}, "
            f"productId: {data.get('product_id')}"
        )
        order = Order(
            product_id=data['product_id'],
            quantity=data['quantity'],
            total_amount=data['total_amount'],
            customer_email=data['customer_email'],
            customer_name=data['customer_name'],
            shipping_address=data.get('shipping_address'),
            notes=data.get('notes'),
            status=OrderStatus.PENDING,
        )
        order = self.store.save(order)
        logger.info(f"Order created with id: {order.id}")
        return order

    @transaction.atomic
    def update_order_status(self, order_id: int, new_status: str) -> Result:
        logger.info(f"Updating order {order_id} status to {new_status}")
        order = self.store.find_by_id(order_id, for_update=True)
        if order is None:
            return Result.failure(NotFoundError("Order", order_id))

        order.status = new_status
        return Result.success(self.store.save(order))

    @transaction.atomic
    def cancel_order(self, order_id: int) -> Result:
        logger.info(f"Cancelling order: {order_id}")
        order = self.store.find_by_id(order_id, for_update=True)
        if order is None:
            return Result.failure(NotFoundError("Order", order_id))

        if not order.is_cancellable:
            logger.warning(f"Refused to cancel order {order_id} in status {order.status}")
            return Result.failure(InvalidTransitionError(order.status, OrderStatus.CANCELLED))

        order.status = OrderStatus.CANCELLED
        return Result.success(self.store.save(order))


def get_order_service() -> OrderService:
    """Build an order service backed by the default database."""
    return OrderService(OrderStore())
