"""
Inventory models for Restock.
"""
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from apps.core.models import BaseModel


class Category(models.TextChoices):
    """Item category choices."""
    TOYS = 'toys', _('Toys')
    MEDICAL = 'medical', _('Medical Supplies')
    OFFICE = 'office', _('Office Supplies')


class StockStatus(models.TextChoices):
    """Derived stock level of an item."""
    IN_STOCK = 'in_stock', _('In Stock')
    LOW_STOCK = 'low_stock', _('Low Stock')
    OUT_OF_STOCK = 'out_of_stock', _('Out of Stock')


def default_category():
    return settings.STOCK_SYSTEM['DEFAULT_CATEGORY']


def default_threshold():
    return settings.STOCK_SYSTEM['DEFAULT_THRESHOLD']


class Item(BaseModel):
    """
    A trackable stock unit.
    """
    name = models.CharField(
        max_length=200,
        verbose_name=_('Item name')
    )

    description = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Description')
    )

    category = models.CharField(
        max_length=20,
        choices=Category.choices,
        default=default_category,
        verbose_name=_('Category')
    )

    quantity = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Current quantity')
    )

    threshold = models.PositiveIntegerField(
        default=default_threshold,
        verbose_name=_('Low stock threshold'),
        help_text=_('Item counts as low stock at or below this quantity')
    )

    source_url = models.URLField(
        max_length=500,
        blank=True,
        default='',
        verbose_name=_('Source URL (purchase link)')
    )

    class Meta(BaseModel.Meta):
        verbose_name = _('Item')
        verbose_name_plural = _('Items')
        db_table = 'inventory'
        indexes = [
            models.Index(fields=['name']),
            models.Index(fields=['category']),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def is_out_of_stock(self):
        return self.quantity == 0

    @property
    def is_low_stock(self):
        """Quantity at or below threshold, out-of-stock items included."""
        return self.quantity <= self.threshold

    @property
    def stock_status(self):
        from apps.inventory.services.stock_service import classify
        return classify(self.quantity, self.threshold)

    @property
    def stock_status_label(self):
        return StockStatus(self.stock_status).label
