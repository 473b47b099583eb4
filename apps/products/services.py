"""
Product Service - catalog reads, soft delete and stock adjustment

The guarded operations (update, delete, stock adjustment) return a
``Result`` instead of raising, so the view layer decides the response code.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import transaction

from apps.core.exceptions import NotFoundError, InsufficientStockError, StockLimitError
from apps.core.results import Result
from .models import Product, STOCK_MAX
from .store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business operations on products. The store is injected so each caller
    decides which persistence it talks to.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def get_all_products(self) -> List[Product]:
        logger.info("Fetching all products")
        return self.store.find_active()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        logger.info(f"Fetching product with id: {product_id}")
        return self.store.find_by_id(product_id)

    def search_by_name(self, name: str) -> List[Product]:
        logger.info(f"Searching products by name: {name}")
        return self.store.find_by_name_containing(name)

    def get_by_category(self, category: str) -> List[Product]:
        logger.info(f"Fetching products by category: {category}")
        return self.store.find_by_category(category)

    def get_in_stock_products(self) -> List[Product]:
        logger.info("Fetching in-stock products")
        return self.store.find_in_stock()

    @transaction.atomic
    def create_product(self, data: Dict[str, Any]) -> Product:
        logger.info(f"Creating product: {data.get('name')}")
        product = Product(
            name=data['name'],
            description=data.get('description'),
            price=data['price'],
            stock=data.get('stock', 0),
            category=data.get('category'),
            active=data.get('active', True),
        )
        product = self.store.save(product)
        logger.info(f"Product created with id: {product.id}")
        return product

    @transaction.atomic
    def update_product(self, product_id: int, data: Dict[str, Any]) -> Result:
        """
        Replace the six editable fields wholesale.

        Stock is taken as-is: the non-negative guard of ``update_stock``
        does not apply here.
        """
        logger.info(f"Updating product with id: {product_id}")
        product = self.store.find_by_id(product_id, for_update=True)
        if product is None:
            return Result.failure(NotFoundError("Product", product_id))

        product.name = data['name']
        product.description = data.get('description')
        product.price = data['price']
        product.stock = data.get('stock', 0)
        product.category = data.get('category')
        product.active = data.get('active', True)

        if product.stock < 0:
            logger.warning(f"Product {product_id} saved with negative stock {product.stock} via full update")

        return Result.success(self.store.save(product))

    @transaction.atomic
    def delete_product(self, product_id: int) -> Result:
        """Soft delete: clear the active flag, keep the row."""
        logger.info(f"Deleting product with id: {product_id}")
        product = self.store.find_by_id(product_id, for_update=True)
        if product is None:
            return Result.failure(NotFoundError("Product", product_id))

        product.active = False
        return Result.success(self.store.save(product))

    @transaction.atomic
    def update_stock(self, product_id: int, quantity: int) -> Result:
        """
        Apply a relative stock adjustment. ``quantity`` is a delta: negative
        to take stock out, positive to replenish.
        """
        logger.info(f"Updating stock for product id: {product_id}, quantity: {quantity}")
        product = self.store.find_by_id(product_id, for_update=True)
        if product is None:
            return Result.failure(NotFoundError("Product", product_id))

        new_stock = product.stock + quantity
        if new_stock < 0:
            logger.warning(f"Rejected stock change for product {product_id}: {product.stock} + {quantity} < 0")
            return Result.failure(
                InsufficientStockError(product_id, available=product.stock, requested=quantity)
            )
        if new_stock > STOCK_MAX:
            logger.warning(f"Rejected stock change for product {product_id}: {product.stock} + {quantity} > {STOCK_MAX}")
            return Result.failure(
                StockLimitError(product_id, available=product.stock, requested=quantity)
            )

        product.stock = new_stock
        return Result.success(self.store.save(product))


def get_product_service() -> ProductService:
    """Build a product service backed by the default database."""
    return ProductService(ProductStore())
