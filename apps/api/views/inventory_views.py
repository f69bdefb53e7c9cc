"""
Inventory API views for Restock.
"""
from rest_framework import generics, filters
from rest_framework.decorators import api_view
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from apps.inventory.models import Item
from apps.inventory.services.item_service import ItemService
from apps.inventory.services.stock_service import StockService
from apps.api.serializers import ItemSerializer, StockSummarySerializer, RequestOptionsSerializer


class ItemListCreateView(generics.ListCreateAPIView):
    """
    List items with search, filtering and ordering.
    Create new items.
    """
    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['category']
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'quantity', 'created_at']
    ordering = ['name']


class ItemDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    Retrieve, update or delete an item.
    """
    queryset = Item.objects.all()
    serializer_class = ItemSerializer

    def perform_destroy(self, instance):
        ItemService.delete_item(instance.id)


@extend_schema(responses=StockSummarySerializer)
@api_view(['GET'])
def stock_summary(request):
    """
    Dashboard counters: total, low stock (out of stock included) and out of stock.
    """
    summary = StockService.summarize(ItemService.list_items())
    return Response(StockSummarySerializer(summary).data)


@extend_schema(responses=RequestOptionsSerializer)
@api_view(['GET'])
def request_options(request):
    """
    Items grouped the way the request dropdown shows them.
    """
    partition = StockService.partition_for_request(ItemService.list_items())
    data = {
        status: [
            {'id': item.id, 'label': StockService.option_label(item), 'quantity': item.quantity}
            for item in group
        ]
        for status, group in partition.items()
    }
    return Response(RequestOptionsSerializer(data).data)
