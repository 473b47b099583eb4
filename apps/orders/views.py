"""
Order Service API Views

- Listing: all orders, by customer email, by status, by product
- Create: new orders always start PENDING
- Lifecycle: status update and cancel
- Health: plain-text liveness probe
"""
import logging

from django.http import HttpResponse
from django.views.decorators.http import require_GET
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiExample

from api.exceptions import error_response, validation_error_response
from apps.core.exceptions import NotFoundError
from .serializers import OrderSerializer, OrderQuerySerializer, OrderStatusSerializer
from .services import get_order_service

logger = logging.getLogger(__name__)


class OrderServiceMixin:
    """
    Builds a fresh service per request. Override ``service_factory`` to
    inject a different store.
    """
    service_factory = staticmethod(get_order_service)

    def get_service(self):
        return self.service_factory()


class OrderListView(OrderServiceMixin, APIView):
    """
    List orders and place new ones.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[OrderQuerySerializer],
        responses={200: OrderSerializer(many=True)},
        description="List orders. Filters apply in order: customerEmail, status, productId."
    )
    def get(self, request):
        query = OrderQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error_response(query.errors)
        filters = query.validated_data
        service = self.get_service()

        if filters.get('customerEmail') is not None:
            orders = service.get_orders_by_customer(filters['customerEmail'])
        elif filters.get('status') is not None:
            orders = service.get_orders_by_status(filters['status'])
        elif filters.get('productId') is not None:
            orders = service.get_orders_by_product(filters['productId'])
        else:
            orders = service.get_all_orders()

        return Response(OrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=OrderSerializer,
        responses={201: OrderSerializer},
        description="Place an order. The status is always PENDING.",
        examples=[
            OpenApiExample(
                "New Order",
                value={
                    "productId": 1,
                    "quantity": 2,
                    "totalAmount": 199.98,
                    "customerEmail": "test@example.com",
                    "customerName": "John Doe",
                    "shippingAddress": "123 Main St, City, Country"
                },
                request_only=True
            ),
        ]
    )
    def post(self, request):
        serializer = OrderSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info(f"Rejected order payload: {list(serializer.errors)}")
            return validation_error_response(serializer.errors)

        order = self.get_service().create_order(serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailView(OrderServiceMixin, APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OrderSerializer},
        description="Get an order by id"
    )
    def get(self, request, order_id):
        order = self.get_service().get_order_by_id(order_id)
        if order is None:
            return error_response(NotFoundError("Order", order_id))
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)


class OrderStatusView(OrderServiceMixin, APIView):
    """
    Overwrite the status of an order. No transition table applies.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[OrderStatusSerializer],
        request=None,
        responses={200: OrderSerializer},
        description="Set the order status"
    )
    def patch(self, request, order_id):
        serializer = OrderStatusSerializer(data=request.query_params)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        result = self.get_service().update_order_status(order_id, serializer.validated_data['status'])
        if not result.ok:
            return error_response(result.error)
        return Response(OrderSerializer(result.value).data, status=status.HTTP_200_OK)


class OrderCancelView(OrderServiceMixin, APIView):
    """
    Cancel an order unless it has already shipped or been delivered.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        request=None,
        responses={200: OrderSerializer},
        description="Cancel an order"
    )
    def post(self, request, order_id):
        result = self.get_service().cancel_order(order_id)
        if not result.ok:
            return error_response(result.error)
        return Response(OrderSerializer(result.value).data, status=status.HTTP_200_OK)


@require_GET
def health(request):
    return HttpResponse("Order Service is UP", content_type="text/plain")
