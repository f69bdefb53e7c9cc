"""
Celery tasks for inventory monitoring.
"""
import logging
from celery import shared_task
from django.db import DatabaseError
from django.utils import timezone
from apps.inventory.services.item_service import ItemService
from apps.inventory.services.stock_service import StockService

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3)
def check_stock_levels(self):
    """
    Periodic task reporting low and out-of-stock items.
    """
    try:
        logger.info("Starting stock level check")

        items = ItemService.list_items()
        summary = StockService.summarize(items)
        out_of_stock = [item.name for item in items if item.is_out_of_stock]
        below_threshold = [StockService.describe(item) for item in items if item.is_low_stock]

        logger.info(
            f"Stock level check completed. {summary['low_stock']} items at or below threshold",
            extra={
                'task_id': self.request.id,
                **summary,
                'out_of_stock_items': out_of_stock,
                'items_below_threshold': below_threshold,
                'event_type': 'stock_check_completed'
            }
        )

        return {
            'status': 'success',
            **summary,
            'out_of_stock_items': out_of_stock,
            'timestamp': timezone.now().isoformat()
        }

    except DatabaseError as e:
        logger.error(
            f"Stock level check failed: {str(e)}",
            extra={
                'task_id': self.request.id,
                'error': str(e),
                'event_type': 'stock_check_failed'
            },
            exc_info=True
        )

        # Retry up to 3 times with exponential backoff
        if self.request.retries < self.max_retries:
            raise self.retry(exc=e, countdown=60 * (2 ** self.request.retries))

        return {
            'status': 'failed',
            'error': str(e),
            'timestamp': timezone.now().isoformat()
        }
