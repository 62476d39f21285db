"""
Items module serializers.
"""
from rest_framework import serializers

from .models import CHANNEL_CHOICES, InventoryMovementModel, ItemModel


class ItemProductSerializer(serializers.Serializer):
    """Product summary embedded in item output."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    brand = serializers.CharField(allow_null=True)
    model = serializers.CharField(allow_null=True)
    category_id = serializers.IntegerField(allow_null=True)


class ItemSerializer(serializers.ModelSerializer):
    """Serializer for item output."""

    product_id = serializers.IntegerField(read_only=True)
    product = ItemProductSerializer(read_only=True)
    total_cost_toman = serializers.IntegerField(source='total_cost', read_only=True)
    profit_toman = serializers.IntegerField(source='profit', read_only=True)

    class Meta:
        model = ItemModel
        fields = [
            'id',
            'product_id',
            'product',
            'serial',
            'condition',
            'status',
            'acquired_at',
            'purchase_toman',
            'fees_toman',
            'refurb_toman',
            'total_cost_toman',
            'location',
            'listed_channel',
            'listed_price_toman',
            'listed_at',
            'sold_at',
            'sold_price_toman',
            'sale_channel',
            'buyer_name',
            'profit_toman',
            'notes',
            'images',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MovementSerializer(serializers.ModelSerializer):
    """Serializer for movement output."""

    item_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = InventoryMovementModel
        fields = ['id', 'item_id', 'movement', 'qty', 'reference', 'notes', 'created_at']
        read_only_fields = fields


class ItemDetailSerializer(ItemSerializer):
    """Item output with its movement history."""

    movements = MovementSerializer(many=True, read_only=True)

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ['movements']
        read_only_fields = fields


class ItemCreateSerializer(serializers.Serializer):
    """Serializer for creating item."""

    product_id = serializers.IntegerField()
    serial = serializers.CharField(max_length=100)
    condition = serializers.ChoiceField(choices=ItemModel.CONDITION_CHOICES, required=False)
    status = serializers.ChoiceField(choices=ItemModel.STATUS_CHOICES, required=False)
    acquired_at = serializers.DateTimeField(required=False)
    purchase_toman = serializers.IntegerField(min_value=0)
    fees_toman = serializers.IntegerField(min_value=0, required=False)
    refurb_toman = serializers.IntegerField(min_value=0, required=False)
    location = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    listed_channel = serializers.ChoiceField(choices=CHANNEL_CHOICES, required=False, allow_null=True)
    listed_price_toman = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    listed_at = serializers.DateTimeField(required=False, allow_null=True)
    sold_at = serializers.DateTimeField(required=False, allow_null=True)
    sold_price_toman = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    sale_channel = serializers.ChoiceField(choices=CHANNEL_CHOICES, required=False, allow_null=True)
    buyer_name = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    images = serializers.ListField(
        child=serializers.URLField(),
        required=False,
    )

    def validate_serial(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("serial cannot be blank")
        return value


class ItemUpdateSerializer(ItemCreateSerializer):
    """Serializer for updating item; every field optional."""

    product_id = serializers.IntegerField(required=False)
    serial = serializers.CharField(max_length=100, required=False)
    purchase_toman = serializers.IntegerField(min_value=0, required=False)
    fees_toman = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    refurb_toman = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    images = serializers.ListField(
        child=serializers.URLField(),
        required=False,
        allow_null=True,
    )


class MovementCreateSerializer(serializers.Serializer):
    """Serializer for appending a movement."""

    movement = serializers.ChoiceField(choices=InventoryMovementModel.MOVEMENT_CHOICES)
    qty = serializers.IntegerField(min_value=1, default=1)
    reference = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ItemListResponseSerializer(serializers.Serializer):
    """Paginated item list."""

    items = ItemSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class SellableItemsResponseSerializer(serializers.Serializer):
    """Items available for a sale."""

    items = ItemSerializer(many=True)
