"""
Product Service Models
Table: products
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

# Range of the 32-bit integer column holding stock
STOCK_MIN = -2 ** 31
STOCK_MAX = 2 ** 31 - 1


class Product(models.Model):
    """
    Product in the catalog.

    Products are never physically removed: deleting one clears ``active``
    so it drops out of the listings while ``get by id`` still finds it.
    """
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Plain IntegerField: the full-update path may store a negative value.
    stock = models.IntegerField(default=0)
    category = models.CharField(max_length=100, blank=True, null=True)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['id']

    def __str__(self):
        return f"{self.name} (${self.price})"
