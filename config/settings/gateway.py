"""
Settings for the gateway. It owns no tables; the default database is only
there because Django expects one.
"""
from .base import *  # noqa: F401,F403
from .base import COMMON_APPS, SPECTACULAR_SETTINGS, database_from_env

INSTALLED_APPS = COMMON_APPS + ['apps.gateway']

ROOT_URLCONF = 'config.urls_gateway'

DATABASES = {
    'default': database_from_env('GATEWAY_DATABASE_URL', 'gateway.sqlite3')
}

SPECTACULAR_SETTINGS = {
    **SPECTACULAR_SETTINGS,
    'TITLE': 'Storefront Gateway API',
}
