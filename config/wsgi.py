"""
WSGI config for the Storefront services.

Set DJANGO_SETTINGS_MODULE to config.settings.product_service,
config.settings.order_service or config.settings.gateway to run one service.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
