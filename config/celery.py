"""
Celery configuration for Restock inventory system.
"""
import os
from celery import Celery
from django.conf import settings

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

app = Celery('restock')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

# Celery beat schedule for periodic tasks
app.conf.beat_schedule = {
    'check-stock-levels': {
        'task': 'apps.inventory.tasks.check_stock_levels',
        'schedule': settings.STOCK_SYSTEM['STOCK_CHECK_INTERVAL'],
    },
}
