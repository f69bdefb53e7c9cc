"""
Serializers for Restock API.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from apps.inventory.models import Item, StockStatus
from apps.inventory.services.item_service import ItemService
from apps.requests.models import RestockRequest, RequestStatus
from apps.requests.services.request_service import coerce_quantity


# Inventory Serializers

class ItemSerializer(serializers.ModelSerializer):
    """Serializer for Item model."""
    stock_status = serializers.ChoiceField(choices=StockStatus.choices, read_only=True)
    stock_status_label = serializers.CharField(read_only=True)

    class Meta:
        model = Item
        fields = [
            'id', 'name', 'description', 'category', 'quantity', 'threshold',
            'source_url', 'stock_status', 'stock_status_label', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'description': {'allow_null': True},
            'source_url': {'allow_null': True},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError(_('Item name is required.'))
        return value

    def create(self, validated_data):
        try:
            return ItemService.create_item(validated_data)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)

    def update(self, instance, validated_data):
        try:
            return ItemService.update_item(instance.id, validated_data)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)


class StockSummarySerializer(serializers.Serializer):
    total = serializers.IntegerField()
    low_stock = serializers.IntegerField()
    out_of_stock = serializers.IntegerField()


class RequestOptionSerializer(serializers.Serializer):
    """One dropdown entry of the request screen."""
    id = serializers.UUIDField()
    label = serializers.CharField()
    quantity = serializers.IntegerField()


class RequestOptionsSerializer(serializers.Serializer):
    out_of_stock = RequestOptionSerializer(many=True)
    low_stock = RequestOptionSerializer(many=True)
    in_stock = RequestOptionSerializer(many=True)


# Request Serializers

class RestockRequestSerializer(serializers.ModelSerializer):
    """Serializer for RestockRequest model."""

    class Meta:
        model = RestockRequest
        fields = [
            'id', 'item', 'item_name', 'category', 'quantity', 'notes',
            'status', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class SubmitRequestSerializer(serializers.Serializer):
    """Input for submitting a restock request."""
    item_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    quantity = serializers.CharField(required=False, allow_blank=True, default='1')
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_quantity(self, value):
        return coerce_quantity(value)


class RequestStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RequestStatus.choices)
