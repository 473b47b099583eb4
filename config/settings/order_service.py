"""
Settings for the standalone order service
"""
from .base import *  # noqa: F401,F403
from .base import COMMON_APPS, SPECTACULAR_SETTINGS, database_from_env

INSTALLED_APPS = COMMON_APPS + ['apps.orders']

ROOT_URLCONF = 'config.urls_orders'

DATABASES = {
    'default': database_from_env('ORDER_DATABASE_URL', 'orders.sqlite3')
}

SPECTACULAR_SETTINGS = {
    **SPECTACULAR_SETTINGS,
    'TITLE': 'Storefront Order Service API',
}
