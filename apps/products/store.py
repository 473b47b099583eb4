"""
Product store - the persistence boundary of the product service.

Wraps the ORM manager so the service only sees find/save operations and can
be handed a different store in tests.
"""
from typing import List, Optional

from .models import Product


class ProductStore:
    """
    Data access for the ``products`` table.
    """

    def __init__(self, queryset=None):
        self.queryset = queryset if queryset is not None else Product.objects.all()

    def find_by_id(self, product_id: int, for_update: bool = False) -> Optional[Product]:
        """
        Return the product or None. ``for_update`` locks the row until the
        surrounding transaction ends.
        """
        queryset = self.queryset.select_for_update() if for_update else self.queryset
        return queryset.filter(pk=product_id).first()

    def find_active(self) -> List[Product]:
        return list(self.queryset.filter(active=True))

    def find_by_name_containing(self, name: str) -> List[Product]:
        return list(self.queryset.filter(active=True, name__icontains=name))

    def find_by_category(self, category: str) -> List[Product]:
        return list(self.queryset.filter(active=True, category__iexact=category))

    def find_in_stock(self) -> List[Product]:
        return list(self.queryset.filter(active=True, stock__gt=0))

    def save(self, product: Product) -> Product:
        product.save()
        return product

    def delete_all(self) -> int:
        deleted, _ = self.queryset.delete()
        return deleted
