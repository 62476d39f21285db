"""
Sales module serializers.
"""
from rest_framework import serializers

from modules.items.models import CHANNEL_CHOICES


class SaleLineSerializer(serializers.Serializer):
    """Serializer for sale line output."""
    id = serializers.IntegerField(read_only=True)
    item_id = serializers.IntegerField(read_only=True)
    serial = serializers.CharField(source='item.serial', read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)
    unit_toman = serializers.IntegerField(read_only=True)


class SaleSerializer(serializers.Serializer):
    """Serializer for sale output."""
    id = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    channel = serializers.CharField(read_only=True)
    reference = serializers.CharField(read_only=True, allow_null=True)
    ordered_at = serializers.DateTimeField(read_only=True)
    total_toman = serializers.IntegerField(read_only=True)
    lines = SaleLineSerializer(many=True, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class SaleSummarySerializer(serializers.Serializer):
    """Serializer for the sale list."""
    id = serializers.IntegerField(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    channel = serializers.CharField(read_only=True)
    reference = serializers.CharField(read_only=True, allow_null=True)
    ordered_at = serializers.DateTimeField(read_only=True)
    total_toman = serializers.IntegerField(read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    fulfilled_items = serializers.IntegerField(read_only=True)


class SaleLineCreateSerializer(serializers.Serializer):
    """Serializer for one line of a new sale."""
    item_id = serializers.IntegerField()
    unit_toman = serializers.IntegerField(min_value=0)


class SaleCreateSerializer(serializers.Serializer):
    """Serializer for creating sale."""
    customer_name = serializers.CharField(max_length=200)
    channel = serializers.ChoiceField(choices=CHANNEL_CHOICES)
    reference = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    ordered_at = serializers.DateTimeField(required=False, allow_null=True)
    lines = SaleLineCreateSerializer(many=True, allow_empty=False)

    def validate_customer_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("customer_name cannot be blank")
        return value
