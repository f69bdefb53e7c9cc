"""
Item service for Restock.
Create, update and delete inventory items.
"""
import logging
from typing import Any, Dict, List
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils.translation import gettext_lazy as _
from apps.inventory.models import Item

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('name', 'description', 'category', 'quantity', 'threshold', 'source_url')


class ItemServiceError(Exception):
    """Base exception for item service errors."""
    pass


class ItemNotFound(ItemServiceError):
    """Raised when an item id does not match any row."""
    pass


class ItemService:
    """Service class for inventory item management."""

    @staticmethod
    def list_items() -> List[Item]:
        """All items, ordered by name."""
        return list(Item.objects.order_by('name'))

    @staticmethod
    def get_item(item_id) -> Item:
        try:
            return Item.objects.get(id=item_id)
        except (Item.DoesNotExist, ValueError, ValidationError):
            raise ItemNotFound(_("Item not found"))

    @staticmethod
    def _clean_data(data: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(data) - set(EDITABLE_FIELDS)
        if unknown:
            raise ItemServiceError(
                _("Unknown item fields: {fields}").format(fields=', '.join(sorted(unknown)))
            )
        cleaned = dict(data)
        # Optional text fields are stored as empty strings, never NULL
        for field in ('description', 'source_url'):
            if field in cleaned and cleaned[field] is None:
                cleaned[field] = ''
        return cleaned

    @staticmethod
    @transaction.atomic
    def create_item(data: Dict[str, Any]) -> Item:
        """
        Insert a new item.

        Args:
            data: Field values, a subset of ``EDITABLE_FIELDS``

        Returns:
            Created Item instance

        Raises:
            ItemServiceError: unknown fields were supplied
            django.core.exceptions.ValidationError: field values are invalid
        """
        item = Item(**ItemService._clean_data(data))
        item.full_clean()
        item.save()

        logger.info("Item created", extra={
            'item_id': str(item.id),
            'item_name': item.name,
            'event_type': 'item_created'
        })
        return item

    @staticmethod
    @transaction.atomic
    def update_item(item_id, data: Dict[str, Any]) -> Item:
        """
        Update an existing item by id.

        Raises:
            ItemNotFound: no item with this id
            ItemServiceError: unknown fields were supplied
            django.core.exceptions.ValidationError: field values are invalid
        """
        cleaned = ItemService._clean_data(data)
        try:
            item = Item.objects.select_for_update().get(id=item_id)
        except (Item.DoesNotExist, ValueError, ValidationError):
            raise ItemNotFound(_("Item not found"))

        before = {field: getattr(item, field) for field in cleaned}
        for field, value in cleaned.items():
            setattr(item, field, value)
        item.full_clean()
        item.save()

        logger.info("Item updated", extra={
            'item_id': str(item.id),
            'before': {k: str(v) for k, v in before.items()},
            'after': {k: str(v) for k, v in cleaned.items()},
            'event_type': 'item_updated'
        })
        return item

    @staticmethod
    @transaction.atomic
    def delete_item(item_id) -> str:
        """
        Delete an item by id.

        Returns:
            Name of the deleted item
        """
        item = ItemService.get_item(item_id)
        name = item.name
        item.delete()

        logger.info("Item deleted", extra={
            'item_id': str(item_id),
            'item_name': name,
            'event_type': 'item_deleted'
        })
        return name
