"""
URL configuration for the all-in-one Storefront deployment
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # Services
    path('', include('apps.products.urls')),
    path('', include('apps.orders.urls')),
    path('', include('apps.gateway.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
