"""
Product Service URL Configuration
"""
from django.urls import path
from .views import (
    ProductListView,
    ProductDetailView,
    ProductStockView,
    health,
)

app_name = 'products'

urlpatterns = [
    path('api/products', ProductListView.as_view(), name='product-list'),
    path('api/products/health', health, name='health'),
    path('api/products/<int:product_id>', ProductDetailView.as_view(), name='product-detail'),
    path('api/products/<int:product_id>/stock', ProductStockView.as_view(), name='product-stock'),
]
