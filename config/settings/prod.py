"""
Production settings for Restock inventory system.
"""
from .base import *

# Security settings for production
DEBUG = False

# Require environment variables for production
if not SECRET_KEY:
    raise ValueError("SECRET_KEY environment variable is required in production")

if not ALLOWED_HOSTS:
    raise ValueError("ALLOWED_HOSTS environment variable is required in production")

# Database - require environment variable
if not env('DATABASE_URL', default=''):
    raise ValueError("DATABASE_URL environment variable is required in production")

# Enhanced security headers
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# Session security
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Strict'

# CSRF protection
CSRF_COOKIE_SECURE = True
CSRF_COOKIE_SAMESITE = 'Strict'

# CORS - restrictive in production
CORS_ALLOW_ALL_ORIGINS = False
if not CORS_ALLOWED_ORIGINS:
    raise ValueError("CORS_ALLOWED_ORIGINS environment variable is required in production")

# Production throttling
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '100/hour',
}

# Production logging - more restrictive
LOGGING['loggers']['django']['level'] = 'WARNING'
LOGGING['loggers']['apps']['level'] = 'INFO'

# Mutations of items and requests go to their own file
LOGGING['handlers']['mutations'] = {
    'class': 'logging.FileHandler',
    'filename': BASE_DIR / 'logs' / 'mutations.log',
    'formatter': 'json',
}

for service_logger in ('apps.inventory.services', 'apps.requests.services'):
    LOGGING['loggers'][service_logger] = {
        'handlers': ['console_json', 'mutations'],
        'level': 'INFO',
        'propagate': False,
    }

# Performance optimizations
CONN_MAX_AGE = 60

# Cache sessions
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_CACHE_ALIAS = 'default'

# Celery production configuration
CELERY_TASK_ALWAYS_EAGER = False
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_TASK_ACKS_LATE = True
CELERY_WORKER_MAX_TASKS_PER_CHILD = 1000

# Production-specific settings
STOCK_SYSTEM.update({
    'STOCK_CHECK_INTERVAL': 600,  # Less frequent checks in prod
})

# Health check settings
ALLOWED_HOSTS += [
    'health-check',
]

MIDDLEWARE.insert(0, 'django.middleware.security.SecurityMiddleware')

# Ensure logs directory exists
logs_dir = BASE_DIR / 'logs'
if not logs_dir.exists():
    logs_dir.mkdir(exist_ok=True)
