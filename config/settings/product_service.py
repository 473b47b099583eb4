"""
Settings for the standalone product service
"""
from .base import *  # noqa: F401,F403
from .base import COMMON_APPS, SPECTACULAR_SETTINGS, database_from_env

INSTALLED_APPS = COMMON_APPS + ['apps.products']

ROOT_URLCONF = 'config.urls_products'

DATABASES = {
    'default': database_from_env('PRODUCT_DATABASE_URL', 'products.sqlite3')
}

SPECTACULAR_SETTINGS = {
    **SPECTACULAR_SETTINGS,
    'TITLE': 'Storefront Product Service API',
}
