"""
Request service for Restock.
Handles submission and status changes of restock requests.
"""
import logging
import re
from typing import Any, List, Optional
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils.translation import gettext_lazy as _
from apps.inventory.models import Item
from apps.requests.models import RestockRequest, RequestStatus

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RequestServiceError(Exception):
    """Base exception for request service errors."""
    pass


class RequestNotFound(RequestServiceError):
    pass


def coerce_quantity(value: Any) -> int:
    """
    Read a requested quantity the way the request form does: anything that
    is not a positive whole number falls back to 1.
    """
    match = LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return 1
    quantity = int(match.group(1))
    return quantity if quantity >= 1 else 1


class RequestService:
    """Service class for restock requests."""

    @staticmethod
    @transaction.atomic
    def submit_request(item_id, quantity: Any = 1, notes: str = "") -> RestockRequest:
        """
        Submit a restock request against an item.

        Args:
            item_id: Id of the requested item
            quantity: Desired quantity, coerced with ``coerce_quantity``
            notes: Optional free text

        Returns:
            Created RestockRequest in ``pending`` status

        Raises:
            RequestServiceError: no item selected, the item no longer exists,
                or the request fails model validation
        """
        if not item_id:
            raise RequestServiceError(_("Please select an item"))

        try:
            item = Item.objects.get(id=item_id)
        except (Item.DoesNotExist, ValueError, ValidationError):
            raise RequestServiceError(_("Please select an item"))

        restock_request = RestockRequest(
            item=item,
            item_name=item.name,
            category=item.category,
            quantity=coerce_quantity(quantity),
            notes=notes or '',
            status=RequestStatus.PENDING,
        )
        try:
            restock_request.full_clean()
        except ValidationError as e:
            logger.warning("Restock request rejected", extra={
                'item_id': str(item.id),
                'errors': e.message_dict,
                'event_type': 'request_invalid'
            })
            raise RequestServiceError(_("Failed to submit request. Please try again."))
        restock_request.save()

        logger.info("Restock request submitted", extra={
            'request_id': str(restock_request.id),
            'item_id': str(item.id),
            'item_name': item.name,
            'quantity': restock_request.quantity,
            'event_type': 'request_submitted'
        })
        return restock_request

    @staticmethod
    def list_requests(status: Optional[str] = None) -> List[RestockRequest]:
        """Requests newest first, optionally filtered by status."""
        query = RestockRequest.objects.select_related('item')
        if status:
            if status not in RequestStatus.values:
                raise RequestServiceError(_("Invalid status: {status}").format(status=status))
            query = query.filter(status=status)
        return list(query.order_by('-created_at'))

    @staticmethod
    @transaction.atomic
    def set_status(request_id, status: str) -> RestockRequest:
        """
        Move a request to a new status.

        Raises:
            RequestNotFound: no request with this id
            RequestServiceError: unknown status
        """
        if status not in RequestStatus.values:
            raise RequestServiceError(_("Invalid status: {status}").format(status=status))

        try:
            restock_request = RestockRequest.objects.select_for_update().get(id=request_id)
        except (RestockRequest.DoesNotExist, ValueError, ValidationError):
            raise RequestNotFound(_("Request not found"))

        old_status = restock_request.status
        restock_request.status = status
        restock_request.save(update_fields=['status', 'updated_at'])

        logger.info("Restock request status changed", extra={
            'request_id': str(restock_request.id),
            'before': old_status,
            'after': status,
            'event_type': 'request_status_changed'
        })
        return restock_request
