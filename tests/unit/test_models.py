"""
Unit tests for Restock models.
"""
import pytest
from datetime import timedelta
from django.utils import timezone
from django.core.exceptions import ValidationError
from apps.inventory.models import Item, Category, StockStatus
from apps.requests.models import RestockRequest, RequestStatus


class TestItemModel:
    """Test Item model."""

    def test_item_defaults(self, db):
        """New items default to toys, zero quantity and a threshold of 10."""
        item = Item.objects.create(name='Kazoo')

        assert item.category == Category.TOYS
        assert item.quantity == 0
        assert item.threshold == 10
        assert item.description == ''
        assert item.source_url == ''
        assert item.created_at is not None

    def test_item_str_representation(self, in_stock_item):
        assert str(in_stock_item) == 'Building Blocks'

    def test_items_ordered_by_name(self, stocked_items):
        names = list(Item.objects.values_list('name', flat=True))
        assert names == ['Ballpoint Pens', 'Building Blocks', 'Gauze Pads']

    def test_negative_quantity_validation(self, db):
        item = Item(name='Broken', quantity=-1, threshold=5)

        with pytest.raises(ValidationError):
            item.full_clean()

    def test_negative_threshold_validation(self, db):
        item = Item(name='Broken', quantity=1, threshold=-5)

        with pytest.raises(ValidationError):
            item.full_clean()

    def test_unknown_category_validation(self, db):
        item = Item(name='Mystery', category='garden')

        with pytest.raises(ValidationError):
            item.full_clean()

    def test_invalid_source_url_validation(self, db):
        item = Item(name='Linked', source_url='not a url')

        with pytest.raises(ValidationError):
            item.full_clean()


class TestItemStockStatus:
    """Derived stock level properties."""

    def test_in_stock(self, in_stock_item):
        assert in_stock_item.stock_status == StockStatus.IN_STOCK
        assert in_stock_item.stock_status_label == 'In Stock'
        assert in_stock_item.is_low_stock is False
        assert in_stock_item.is_out_of_stock is False

    def test_low_stock_at_threshold(self, low_stock_item):
        assert low_stock_item.stock_status == StockStatus.LOW_STOCK
        assert low_stock_item.stock_status_label == 'Low Stock'
        assert low_stock_item.is_low_stock is True
        assert low_stock_item.is_out_of_stock is False

    def test_out_of_stock_counts_as_low(self, out_of_stock_item):
        assert out_of_stock_item.stock_status == StockStatus.OUT_OF_STOCK
        assert out_of_stock_item.stock_status_label == 'Out of Stock'
        assert out_of_stock_item.is_out_of_stock is True
        assert out_of_stock_item.is_low_stock is True

    def test_zero_threshold_zero_quantity_is_out(self, db):
        item = Item.objects.create(name='Edge', quantity=0, threshold=0)
        assert item.stock_status == StockStatus.OUT_OF_STOCK


class TestRestockRequestModel:
    """Test RestockRequest model."""

    def test_request_defaults(self, low_stock_item):
        restock_request = RestockRequest.objects.create(
            item=low_stock_item,
            item_name=low_stock_item.name,
            category=low_stock_item.category
        )

        assert restock_request.status == RequestStatus.PENDING
        assert restock_request.quantity == 1
        assert restock_request.notes == ''

    def test_request_str_representation(self, pending_request):
        pending_request.refresh_from_db()
        assert str(pending_request) == 'Gauze Pads x10 (pending)'

    def test_zero_quantity_validation(self, low_stock_item):
        restock_request = RestockRequest(
            item=low_stock_item,
            item_name=low_stock_item.name,
            category=low_stock_item.category,
            quantity=0
        )

        with pytest.raises(ValidationError):
            restock_request.full_clean()

    def test_request_survives_item_deletion(self, pending_request, low_stock_item):
        low_stock_item.delete()
        pending_request.refresh_from_db()

        assert pending_request.item is None
        assert pending_request.item_name == 'Gauze Pads'
        assert pending_request.category == 'medical'

    def test_requests_newest_first(self, pending_request, in_stock_item):
        newer = RestockRequest.objects.create(
            item=in_stock_item,
            item_name=in_stock_item.name,
            category=in_stock_item.category,
            quantity=2
        )
        RestockRequest.objects.filter(pk=pending_request.pk).update(
            created_at=timezone.now() - timedelta(minutes=5)
        )

        assert list(RestockRequest.objects.all()) == [newer, pending_request]
        assert RestockRequest.objects.latest() == newer
        assert RestockRequest.objects.earliest() == pending_request
