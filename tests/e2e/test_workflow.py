"""
End-to-end workflow tests for Restock.
Tests complete journeys across the admin and request screens.
"""
import pytest
from django.core.management import call_command
from django.urls import reverse
from apps.inventory.models import Item, Category
from apps.requests.models import RestockRequest, RequestStatus


@pytest.mark.e2e
class TestInventoryWorkflow:
    """Item lifecycle as seen from both screens."""

    def test_item_lifecycle(self, client):
        """
        Test complete workflow:
        1. Admin adds an item above its threshold
        2. Request screen lists it as in stock, no alerts
        3. Admin lowers the quantity to zero
        4. Request screen flags it as out of stock and needing attention
        5. Admin deletes it
        """
        admin_url = reverse('inventory:admin_dashboard')
        request_url = reverse('requests:request_page')

        # 1. Add
        response = client.post(admin_url, {
            'name': 'Printer Paper',
            'category': Category.OFFICE,
            'quantity': 30,
            'threshold': 10,
        }, follow=True)
        assert b'Item added successfully' in response.content
        item = Item.objects.get(name='Printer Paper')

        # 2. In stock
        response = client.get(request_url)
        assert response.context['out_of_stock_count'] == 0
        assert response.context['low_stock_count'] == 0
        assert response.context['attention_items'] == []
        assert 'Printer Paper - office (30 in stock)' in response.content.decode()

        # 3. Run out
        response = client.post(reverse('inventory:edit_item', args=[item.id]), {
            'name': 'Printer Paper',
            'category': Category.OFFICE,
            'quantity': 0,
            'threshold': 10,
        }, follow=True)
        assert b'Item updated successfully' in response.content
        assert response.context['stats'] == {'total': 1, 'low_stock': 1, 'out_of_stock': 1}

        # 4. Flagged on the request screen
        response = client.get(request_url)
        assert response.context['out_of_stock_count'] == 1
        assert response.context['low_stock_count'] == 1
        assert [i.name for i in response.context['attention_items']] == ['Printer Paper']
        assert 'OUT OF STOCK - URGENT' in response.content.decode()

        # 5. Delete
        response = client.post(reverse('inventory:delete_item', args=[item.id]), follow=True)
        assert b'Item deleted successfully' in response.content
        assert response.context['stats']['total'] == 0

    def test_request_from_attention_list(self, client, stocked_items, low_stock_item):
        """
        A requester follows an attention link, submits a request and an
        operator approves then fulfils it through the API.
        """
        request_url = reverse('requests:request_page')

        response = client.get(request_url)
        link = f'?item={low_stock_item.id}'
        assert link.encode() in response.content

        response = client.get(request_url + link)
        assert response.context['form']['item'].value() == str(low_stock_item.id)

        response = client.post(request_url, {
            'item': str(low_stock_item.id),
            'quantity': '20',
            'notes': 'Clinic restock',
        }, follow=True)
        assert b'Request submitted successfully!' in response.content

        restock_request = RestockRequest.objects.get()
        assert restock_request.status == RequestStatus.PENDING

        for new_status in (RequestStatus.APPROVED, RequestStatus.FULFILLED):
            response = client.post(
                reverse('api:request_status', args=[restock_request.id]),
                {'status': new_status},
                content_type='application/json',
            )
            assert response.status_code == 200

        restock_request.refresh_from_db()
        assert restock_request.status == RequestStatus.FULFILLED

        # Requests never touch stock levels
        low_stock_item.refresh_from_db()
        assert low_stock_item.quantity == 5


@pytest.mark.e2e
class TestSeedData:
    """Demo data command."""

    def test_seed_data(self, client):
        call_command('seed_data')

        assert Item.objects.count() == 12
        assert RestockRequest.objects.count() == 2

        response = client.get(reverse('requests:request_page'))
        assert response.context['out_of_stock_count'] == 3
        assert len(response.context['attention_items']) == 6

    def test_seed_data_is_repeatable(self):
        call_command('seed_data', '--items-only')
        call_command('seed_data', '--items-only')

        assert Item.objects.count() == 12
        assert RestockRequest.objects.count() == 0

    def test_seed_data_clear(self, pending_request):
        call_command('seed_data', '--clear', '--items-only')

        assert RestockRequest.objects.count() == 0
        assert not Item.objects.filter(name='Gauze Pads').exists()
        assert Item.objects.count() == 12
