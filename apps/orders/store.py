"""
Order store - the persistence boundary of the order service.
"""
from typing import List, Optional

from .models import Order


class OrderStore:
    """
    Data access for the ``orders`` table.
    """

    def __init__(self, queryset=None):
        self.queryset = queryset if queryset is not None else Order.objects.all()

    def find_by_id(self, order_id: int, for_update: bool = False) -> Optional[Order]:
        queryset = self.queryset.select_for_update() if for_update else self.queryset
        return queryset.filter(pk=order_id).first()

    def find_all(self) -> List[Order]:
        return list(self.queryset)

    def find_by_customer_email(self, email: str) -> List[Order]:
        """Newest first."""
        return list(self.queryset.filter(customer_email=email).order_by('-created_at', '-id'))

    def find_by_status(self, status: str) -> List[Order]:
        return list(self.queryset.filter(status=status))

    def find_by_product_id(self, product_id: int) -> List[Order]:
        return list(self.queryset.filter(product_id=product_id))

    def save(self, order: Order) -> Order:
        order.save()
        return order

    def delete_all(self) -> int:
        deleted, _ = self.queryset.delete()
        return deleted
