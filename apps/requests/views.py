"""
Request screen views for Restock.
"""
import logging
from django.conf import settings
from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import render, redirect
from django.utils.translation import gettext as _
from django.views.decorators.http import require_http_methods
from apps.inventory.services.item_service import ItemService
from apps.inventory.services.stock_service import StockService
from apps.requests.forms import RestockRequestForm
from apps.requests.services.request_service import RequestService, RequestServiceError

logger = logging.getLogger(__name__)


def _load_items():
    # A failed load is logged only; the screen falls back to an empty list
    try:
        return ItemService.list_items()
    except DatabaseError:
        logger.error("Error fetching items", exc_info=True, extra={'event_type': 'items_fetch_failed'})
        return []


@require_http_methods(["GET", "POST"])
def request_page(request):
    """
    Alert cards, the request form and the items needing attention.
    POST submits a request and redirects back with a cleared form.
    """
    items = _load_items()
    partition = StockService.partition_for_request(items)

    if request.method == 'POST':
        form = RestockRequestForm(request.POST, partition=partition)
        if form.is_valid():
            try:
                RequestService.submit_request(
                    item_id=form.cleaned_data['item'],
                    quantity=form.cleaned_data['quantity'],
                    notes=form.cleaned_data['notes'],
                )
            except RequestServiceError as e:
                messages.error(request, str(e))
            except DatabaseError:
                logger.error("Error submitting request", exc_info=True, extra={
                    'event_type': 'request_submit_failed'
                })
                messages.error(request, _('Failed to submit request. Please try again.'))
            else:
                messages.success(request, _('Request submitted successfully!'))
                return redirect('requests:request_page')
    else:
        form = RestockRequestForm(
            initial={'item': request.GET.get('item', ''), 'quantity': 1, 'notes': ''},
            partition=partition,
        )

    summary = StockService.summarize(items)
    context = {
        'page_title': _('Request Items'),
        'form': form,
        'out_of_stock_count': summary['out_of_stock'],
        'low_stock_count': summary['low_stock'],
        'attention_items': StockService.needing_attention(items),
        'toast_timeout_ms': settings.STOCK_SYSTEM['REQUEST_TOAST_TIMEOUT_MS'],
    }
    return render(request, 'requests/request_page.html', context)
