"""
Gateway URL Configuration
"""
from django.urls import path
from .views import FallbackView, health

app_name = 'gateway'

urlpatterns = [
    path('fallback/products', FallbackView.as_view(route='products'), name='product-fallback'),
    path('fallback/orders', FallbackView.as_view(route='orders'), name='order-fallback'),
    path('fallback/health', health, name='health'),
]
