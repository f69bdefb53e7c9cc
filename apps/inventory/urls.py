"""
Admin screen URLs.
"""
from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    path('admin-dashboard/', views.admin_dashboard, name='admin_dashboard'),
    path('admin-dashboard/items/<uuid:item_id>/edit/', views.edit_item, name='edit_item'),
    path('admin-dashboard/items/<uuid:item_id>/delete/', views.delete_item, name='delete_item'),
]
