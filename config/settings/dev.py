"""
Development settings for Restock inventory system.
"""
from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

SECRET_KEY = SECRET_KEY or 'dev-insecure-restock-key'

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Database - use environment or default SQLite for dev
if not env('DATABASE_URL', default=''):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

# Disable security features for development
SECURE_SSL_REDIRECT = False
SECURE_HSTS_SECONDS = 0
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# CORS - allow all origins in development
CORS_ALLOW_ALL_ORIGINS = True

INTERNAL_IPS = [
    '127.0.0.1',
    'localhost',
]

# Additional development apps
INSTALLED_APPS += [
    'django_extensions',
]

# Relaxed throttling for development
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '10000/hour',
}

# Less strict logging in development
LOGGING['loggers']['django']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['handlers'] = ['console']

# Development-specific settings
STOCK_SYSTEM.update({
    'STOCK_CHECK_INTERVAL': 30,  # More frequent checks in dev
})

# Celery configuration for development
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
