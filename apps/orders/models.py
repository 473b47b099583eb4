"""
Order Service Models
Table: orders
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

# Column ranges: product_id is a 64-bit integer, quantity a 32-bit one
PRODUCT_ID_MAX = 2 ** 63 - 1
QUANTITY_MAX = 2 ** 31 - 1


class OrderStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    CONFIRMED = 'CONFIRMED', 'Confirmed'
    PROCESSING = 'PROCESSING', 'Processing'
    SHIPPED = 'SHIPPED', 'Shipped'
    DELIVERED = 'DELIVERED', 'Delivered'
    CANCELLED = 'CANCELLED', 'Cancelled'
    REFUNDED = 'REFUNDED', 'Refunded'


# Orders in these states have left the warehouse and cannot be cancelled.
NON_CANCELLABLE_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED})


class Order(models.Model):
    """
    Customer order for a single product.

    ``product_id`` is a plain identifier: the product lives in the product
    service's database, so there is no foreign key.
    """
    product_id = models.BigIntegerField(db_index=True)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    customer_email = models.EmailField(db_index=True)
    customer_name = models.CharField(max_length=255)
    shipping_address = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['id']

    def __str__(self):
        return f"Order {self.id} - {self.customer_email} - product {self.product_id} ({self.status})"

    @property
    def is_cancellable(self) -> bool:
        return self.status not in NON_CANCELLABLE_STATUSES

    def save(self, *args, **kwargs):
        # updated_at stays empty on insert and tracks every later write
        if self.pk is not None:
            self.updated_at = timezone.now()
            update_fields = kwargs.get('update_fields')
            if update_fields is not None and 'updated_at' not in update_fields:
                kwargs['update_fields'] = list(update_fields) + ['updated_at']
        super().save(*args, **kwargs)
