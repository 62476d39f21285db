"""
Purchases module serializers.
"""
from rest_framework import serializers

from modules.items.models import CHANNEL_CHOICES
from modules.items.serializers import ItemSerializer


class PurchaseLineSerializer(serializers.Serializer):
    """Serializer for purchase line output."""
    id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_toman = serializers.IntegerField(read_only=True)
    fees_toman = serializers.IntegerField(read_only=True)
    line_total_toman = serializers.IntegerField(source='line_total', read_only=True)
    created_item_ids = serializers.SerializerMethodField()

    def get_created_item_ids(self, obj):
        return sorted(item.id for item in obj.created_items.all())


class PurchaseSerializer(serializers.Serializer):
    """Serializer for purchase output."""
    id = serializers.IntegerField(read_only=True)
    supplier_name = serializers.CharField(read_only=True)
    reference = serializers.CharField(read_only=True, allow_null=True)
    channel = serializers.CharField(read_only=True, allow_null=True)
    ordered_at = serializers.DateTimeField(read_only=True)
    total_toman = serializers.IntegerField(read_only=True)
    lines = PurchaseLineSerializer(many=True, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for the purchase list."""
    id = serializers.IntegerField(read_only=True)
    supplier_name = serializers.CharField(read_only=True)
    reference = serializers.CharField(read_only=True, allow_null=True)
    channel = serializers.CharField(read_only=True, allow_null=True)
    ordered_at = serializers.DateTimeField(read_only=True)
    total_toman = serializers.IntegerField(read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    received_items = serializers.IntegerField(read_only=True)


class PurchaseReceiveSerializer(serializers.Serializer):
    """Result of receiving a purchase."""
    purchase = PurchaseSerializer(read_only=True)
    already_received = serializers.BooleanField(read_only=True)
    created_items = ItemSerializer(many=True, read_only=True)


class PurchaseLineCreateSerializer(serializers.Serializer):
    """Serializer for one line of a new purchase."""
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)
    unit_toman = serializers.IntegerField(min_value=0)
    fees_toman = serializers.IntegerField(min_value=0, default=0)


class PurchaseCreateSerializer(serializers.Serializer):
    """Serializer for creating purchase."""
    supplier_name = serializers.CharField(max_length=200)
    reference = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    channel = serializers.ChoiceField(choices=CHANNEL_CHOICES, required=False, allow_null=True)
    ordered_at = serializers.DateTimeField(required=False, allow_null=True)
    lines = PurchaseLineCreateSerializer(many=True, allow_empty=False)

    def validate_supplier_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("supplier_name cannot be blank")
        return value
