"""
Order Service URL Configuration
"""
from django.urls import path
from .views import (
    OrderListView,
    OrderDetailView,
    OrderStatusView,
    OrderCancelView,
    health,
)

app_name = 'orders'

urlpatterns = [
    path('api/orders', OrderListView.as_view(), name='order-list'),
    path('api/orders/health', health, name='health'),
    path('api/orders/<int:order_id>', OrderDetailView.as_view(), name='order-detail'),
    path('api/orders/<int:order_id>/status', OrderStatusView.as_view(), name='order-status'),
    path('api/orders/<int:order_id>/cancel', OrderCancelView.as_view(), name='order-cancel'),
]
