"""
Requests app configuration for Restock.
"""
from django.apps import AppConfig


class RequestsConfig(AppConfig):
    """Restock requests application configuration."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.requests'
    label = 'restock_requests'
    verbose_name = 'Restock Requests'
