"""
Product Service API Views

- Listing and search: all active products, by name, by category, in stock
- CRUD: create, get by id, full update, soft delete
- Stock: relative stock adjustment
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
from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductQuerySerializer,
    StockAdjustmentSerializer,
)
from .services import get_product_service

logger = logging.getLogger(__name__)


class ProductServiceMixin:
    """
    Builds a fresh service per request. Override ``service_factory`` to
    inject a different store.
    """
    service_factory = staticmethod(get_product_service)

    def get_service(self):
        return self.service_factory()


class ProductListView(ProductServiceMixin, APIView):
    """
    List or search active products, and create new ones.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[ProductQuerySerializer],
        responses={200: ProductSerializer(many=True)},
        description="List active products. Filters apply in order: name, category, inStock."
    )
    def get(self, request):
        query = ProductQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error_response(query.errors)
        filters = query.validated_data
        logger.info(f"Product list request - filters: {dict(filters)}")
        service = self.get_service()

        if filters.get('name') is not None:
            products = service.search_by_name(filters['name'])
        elif filters.get('category') is not None:
            products = service.get_by_category(filters['category'])
        elif filters.get('inStock'):
            products = service.get_in_stock_products()
        else:
            products = service.get_all_products()

        return Response(ProductSerializer(products, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        description="Create a product",
        examples=[
            OpenApiExample(
                "New Product",
                value={
                    "name": "Wireless Headphones",
                    "description": "Over-ear, noise cancelling",
                    "price": 149.99,
                    "stock": 25,
                    "category": "Electronics"
                },
                request_only=True
            ),
        ]
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        product = self.get_service().create_product(serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(ProductServiceMixin, APIView):
    """
    Read, replace or soft-delete a single product.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer},
        description="Get a product by id, including inactive products"
    )
    def get(self, request, product_id):
        product = self.get_service().get_product_by_id(product_id)
        if product is None:
            return error_response(NotFoundError("Product", product_id))
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    @extend_schema(
        request=ProductSerializer,
        responses={200: ProductSerializer},
        description="Replace name, description, price, stock, category and active"
    )
    def put(self, request, product_id):
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        result = self.get_service().update_product(product_id, serializer.validated_data)
        if not result.ok:
            return error_response(result.error)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(
        responses={204: None},
        description="Soft delete: the product is hidden from listings but kept"
    )
    def delete(self, request, product_id):
        result = self.get_service().delete_product(product_id)
        if not result.ok:
            return error_response(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductStockView(ProductServiceMixin, APIView):
    """
    Relative stock adjustment. Rejected when stock would go below zero.
    """
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[StockAdjustmentSerializer],
        request=None,
        responses={200: ProductSerializer},
        description="Add ``quantity`` (may be negative) to the product stock"
    )
    def patch(self, request, product_id):
        serializer = StockAdjustmentSerializer(data=request.query_params)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        result = self.get_service().update_stock(product_id, serializer.validated_data['quantity'])
        if not result.ok:
            return error_response(result.error)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)


@require_GET
def health(request):
    return HttpResponse("Product Service is UP", content_type="text/plain")
