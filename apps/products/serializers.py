"""
Product Serializers for Request/Response handling
"""
from decimal import Decimal

from rest_framework import serializers

from .models import Product, STOCK_MIN, STOCK_MAX


class ProductSerializer(serializers.ModelSerializer):
    """
    Full product representation and the validation pass for a full update:
    every editable field ends up in ``validated_data``. Stock may be
    negative here.
    """
    name = serializers.CharField(
        max_length=255,
        help_text="Product name"
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        help_text="Product description"
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        help_text="Unit price"
    )
    stock = serializers.IntegerField(
        required=False,
        default=0,
        min_value=STOCK_MIN,
        max_value=STOCK_MAX,
        help_text="Units in stock"
    )
    category = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=100,
        default=None,
        help_text="Product category"
    )
    active = serializers.BooleanField(
        required=False,
        default=True,
        help_text="False once the product has been deleted"
    )

    class Meta:
        model = Product
        fields = ['id', 'name', 'description', 'price', 'stock', 'category', 'active']
        read_only_fields = ['id']


class ProductCreateSerializer(ProductSerializer):
    """
    Validation pass for product creation: new products never start with
    negative stock.
    """
    stock = serializers.IntegerField(
        required=False,
        default=0,
        min_value=0,
        max_value=STOCK_MAX,
        help_text="Units in stock"
    )


class StockAdjustmentSerializer(serializers.Serializer):
    """
    Query parameters of the stock adjustment endpoint.
    """
    quantity = serializers.IntegerField(
        required=True,
        min_value=STOCK_MIN - STOCK_MAX,
        max_value=STOCK_MAX - STOCK_MIN,
        help_text="Delta to apply: negative takes stock out, positive replenishes"
    )


class ProductQuerySerializer(serializers.Serializer):
    """
    Optional filters of the product listing endpoint.
    """
    name = serializers.CharField(required=False, allow_blank=True, help_text="Case-insensitive name substring")
    category = serializers.CharField(required=False, allow_blank=True, help_text="Case-insensitive category")
    inStock = serializers.BooleanField(required=False, help_text="Only products with stock > 0")
