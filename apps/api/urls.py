"""
API URLs for Restock.
"""
from django.urls import path, include
from apps.api.views import inventory_views, requests_views
from apps.core.views import health_check

app_name = 'api'

# Inventory URLs
inventory_urlpatterns = [
    path('items/', inventory_views.ItemListCreateView.as_view(), name='item_list'),
    path('items/summary/', inventory_views.stock_summary, name='stock_summary'),
    path('items/request-options/', inventory_views.request_options, name='request_options'),
    path('items/<uuid:pk>/', inventory_views.ItemDetailView.as_view(), name='item_detail'),
]

# Request URLs
requests_urlpatterns = [
    path('requests/', requests_views.RestockRequestListView.as_view(), name='request_list'),
    path('requests/<uuid:request_id>/status/', requests_views.set_request_status, name='request_status'),
]

urlpatterns = [
    path('health/', health_check, name='health'),
    path('', include(inventory_urlpatterns)),
    path('', include(requests_urlpatterns)),
]
