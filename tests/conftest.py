"""
Pytest configuration and fixtures for Restock tests.
"""
import pytest
from rest_framework.test import APIClient
from apps.inventory.models import Item, Category
from apps.requests.models import RestockRequest, RequestStatus


@pytest.fixture
def api_client():
    """API client for testing."""
    return APIClient()


@pytest.fixture
def in_stock_item(db):
    """Item comfortably above its threshold."""
    return Item.objects.create(
        name='Building Blocks',
        description='Wooden block set',
        category=Category.TOYS,
        quantity=25,
        threshold=10,
        source_url='https://example.com/blocks'
    )


@pytest.fixture
def low_stock_item(db):
    """Item at its threshold."""
    return Item.objects.create(
        name='Gauze Pads',
        category=Category.MEDICAL,
        quantity=5,
        threshold=5
    )


@pytest.fixture
def out_of_stock_item(db):
    """Item with nothing left."""
    return Item.objects.create(
        name='Ballpoint Pens',
        category=Category.OFFICE,
        quantity=0,
        threshold=20
    )


@pytest.fixture
def stocked_items(in_stock_item, low_stock_item, out_of_stock_item):
    """One item of each stock level."""
    return [in_stock_item, low_stock_item, out_of_stock_item]


@pytest.fixture
def pending_request(db, low_stock_item):
    """Pending request against the low stock item."""
    return RestockRequest.objects.create(
        item=low_stock_item,
        item_name=low_stock_item.name,
        category=low_stock_item.category,
        quantity=10,
        notes='Running low at the front desk',
        status=RequestStatus.PENDING
    )


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """
    Enable database access for all tests.
    """
    pass
