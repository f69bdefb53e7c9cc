from django.contrib import admin
from .models import RestockRequest


@admin.register(RestockRequest)
class RestockRequestAdmin(admin.ModelAdmin):
    list_display = ('item_name', 'category', 'quantity', 'status', 'created_at')
    list_filter = ('status', 'category')
    list_editable = ('status',)
    search_fields = ('item_name', 'notes')
    readonly_fields = ('item', 'item_name', 'category', 'created_at', 'updated_at')
