"""
Order Serializers for Request/Response handling

The wire format keeps camelCase field names.
"""
from decimal import Decimal

from rest_framework import serializers

from .models import Order, OrderStatus, PRODUCT_ID_MAX, QUANTITY_MAX


class OrderSerializer(serializers.ModelSerializer):
    """
    Order representation and the validation pass for order creation.
    ``status`` is read-only, so a status sent by the client never reaches
    the service.
    """
    productId = serializers.IntegerField(
        source='product_id',
        min_value=1,
        max_value=PRODUCT_ID_MAX,
        help_text="Identifier of the ordered product"
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=QUANTITY_MAX,
        help_text="Number of units, at least 1"
    )
    totalAmount = serializers.DecimalField(
        source='total_amount',
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        help_text="Total order amount"
    )
    customerEmail = serializers.EmailField(
        source='customer_email',
        help_text="Customer email address"
    )
    customerName = serializers.CharField(
        source='customer_name',
        max_length=255,
        help_text="Customer full name"
    )
    shippingAddress = serializers.CharField(
        source='shipping_address',
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Delivery address"
    )
    notes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Order notes"
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'productId', 'quantity', 'totalAmount', 'status',
            'customerEmail', 'customerName', 'shippingAddress', 'notes',
            'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id', 'status']


class OrderStatusSerializer(serializers.Serializer):
    """
    Query parameters of the status update endpoint.
    """
    status = serializers.ChoiceField(
        choices=OrderStatus.choices,
        help_text="Target status"
    )


class OrderQuerySerializer(serializers.Serializer):
    """
    Optional filters of the order listing endpoint.
    """
    customerEmail = serializers.CharField(required=False, allow_blank=True, help_text="Orders of this customer, newest first")
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False, help_text="Orders in this status")
    productId = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=PRODUCT_ID_MAX,
        help_text="Orders for this product"
    )
