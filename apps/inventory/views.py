"""
Admin screen views for Restock.

The screen is a single page: stats, an optional add/edit form and the item
table. Every mutation redirects back to the page so the list is always a
fresh read of the table.
"""
import logging
from django.conf import settings
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.shortcuts import render, redirect
from django.utils.translation import gettext as _
from django.views.decorators.http import require_http_methods
from apps.inventory.forms import ItemForm
from apps.inventory.services.item_service import ItemService, ItemNotFound, ItemServiceError
from apps.inventory.services.stock_service import StockService

logger = logging.getLogger(__name__)


def _load_items(request):
    try:
        return ItemService.list_items()
    except DatabaseError:
        logger.error("Error fetching items", exc_info=True, extra={'event_type': 'items_fetch_failed'})
        messages.error(request, _('Failed to load inventory'))
        return []


def _render_dashboard(request, form=None, editing=None, status=200):
    items = _load_items(request)
    show_form = form is not None or request.GET.get('add') == '1'
    if show_form and form is None:
        form = ItemForm()

    context = {
        'page_title': _('Admin Dashboard'),
        'items': items,
        'stats': StockService.summarize(items),
        'form': form,
        'show_form': show_form,
        'editing': editing,
        'toast_timeout_ms': settings.STOCK_SYSTEM['ADMIN_TOAST_TIMEOUT_MS'],
    }
    return render(request, 'inventory/admin_dashboard.html', context, status=status)


@require_http_methods(["GET", "POST"])
def admin_dashboard(request):
    """
    Item list with the add form.
    POST creates a new item.
    """
    if request.method == 'GET':
        return _render_dashboard(request)

    form = ItemForm(request.POST)
    if not form.is_valid():
        return _render_dashboard(request, form=form, status=400)

    try:
        ItemService.create_item(form.cleaned_data)
    except (ItemServiceError, ValidationError, DatabaseError):
        logger.error("Error saving item", exc_info=True, extra={'event_type': 'item_save_failed'})
        messages.error(request, _('Failed to save item'))
        return _render_dashboard(request, form=form, status=400)

    messages.success(request, _('Item added successfully'))
    return redirect('inventory:admin_dashboard')


@require_http_methods(["GET", "POST"])
def edit_item(request, item_id):
    """
    Edit form pre-filled with the item.
    POST updates the item.
    """
    try:
        item = ItemService.get_item(item_id)
    except ItemNotFound:
        messages.error(request, _('Item not found'))
        return redirect('inventory:admin_dashboard')

    if request.method == 'GET':
        return _render_dashboard(request, form=ItemForm.for_item(item), editing=item)

    form = ItemForm.for_item(item, data=request.POST)
    if not form.is_valid():
        return _render_dashboard(request, form=form, editing=item, status=400)

    try:
        ItemService.update_item(item.id, form.cleaned_data)
    except (ItemServiceError, ValidationError, DatabaseError):
        logger.error("Error saving item", exc_info=True, extra={
            'item_id': str(item.id),
            'event_type': 'item_save_failed'
        })
        messages.error(request, _('Failed to save item'))
        return _render_dashboard(request, form=form, editing=item, status=400)

    messages.success(request, _('Item updated successfully'))
    return redirect('inventory:admin_dashboard')


@require_http_methods(["GET", "POST"])
def delete_item(request, item_id):
    """
    GET asks for confirmation, POST deletes.
    """
    try:
        item = ItemService.get_item(item_id)
    except ItemNotFound:
        messages.error(request, _('Item not found'))
        return redirect('inventory:admin_dashboard')

    if request.method == 'GET':
        context = {
            'page_title': _('Delete Item'),
            'item': item,
            'confirm_message': _('Are you sure you want to delete "%(name)s"?') % {'name': item.name},
        }
        return render(request, 'inventory/confirm_delete.html', context)

    try:
        ItemService.delete_item(item.id)
    except (ItemServiceError, DatabaseError):
        logger.error("Error deleting item", exc_info=True, extra={
            'item_id': str(item.id),
            'event_type': 'item_delete_failed'
        })
        messages.error(request, _('Failed to delete item'))
    else:
        messages.success(request, _('Item deleted successfully'))

    return redirect('inventory:admin_dashboard')
