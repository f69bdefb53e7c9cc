from django.contrib import admin
from .models import Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'quantity', 'threshold', 'stock_status_label', 'updated_at')
    list_filter = ('category',)
    search_fields = ('name', 'description')
    ordering = ('name',)

    @admin.display(description='Status')
    def stock_status_label(self, obj):
        return obj.stock_status_label
