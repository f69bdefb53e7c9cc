"""
Restock request models.
"""
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from apps.core.models import BaseModel
from apps.inventory.models import Item


class RequestStatus(models.TextChoices):
    """Restock request status choices."""
    PENDING = 'pending', _('Pending')
    APPROVED = 'approved', _('Approved')
    FULFILLED = 'fulfilled', _('Fulfilled')
    REJECTED = 'rejected', _('Rejected')


class RestockRequest(BaseModel):
    """
    A user-submitted request to restock an item.
    Item name and category are copied at submit time so the request
    still reads correctly after the item is renamed or deleted.
    """
    item = models.ForeignKey(
        Item,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='requests',
        verbose_name=_('Item')
    )

    item_name = models.CharField(
        max_length=200,
        verbose_name=_('Item name')
    )

    category = models.CharField(
        max_length=20,
        verbose_name=_('Category')
    )

    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name=_('Quantity needed')
    )

    notes = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Additional notes')
    )

    status = models.CharField(
        max_length=20,
        choices=RequestStatus.choices,
        default=RequestStatus.PENDING,
        verbose_name=_('Status')
    )

    class Meta(BaseModel.Meta):
        verbose_name = _('Restock Request')
        verbose_name_plural = _('Restock Requests')
        db_table = 'requests'
        indexes = [
            models.Index(fields=['status']),
            models.Index(fields=['item']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.item_name} x{self.quantity} ({self.status})"
