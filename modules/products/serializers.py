"""
Products module serializers.
"""
from rest_framework import serializers

from .models import ProductModel


class ProductCategorySerializer(serializers.Serializer):
    """Category summary embedded in product output."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    path = serializers.CharField()


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product output."""

    category_id = serializers.IntegerField(read_only=True, allow_null=True)
    category = ProductCategorySerializer(read_only=True, allow_null=True)
    items_count = serializers.SerializerMethodField()

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'name',
            'brand',
            'model',
            'category_id',
            'category',
            'specs',
            'image_urls',
            'items_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_items_count(self, obj) -> int:
        count = getattr(obj, 'items_count', None)
        if count is None:
            return obj.items.count()
        return count


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for creating product."""

    name = serializers.CharField(max_length=200)
    brand = serializers.CharField(max_length=100, required=False, allow_null=True)
    model = serializers.CharField(max_length=100, required=False, allow_null=True)
    category_id = serializers.IntegerField(required=False, allow_null=True)
    specs = serializers.JSONField(required=False, allow_null=True)
    image_urls = serializers.ListField(
        child=serializers.URLField(),
        required=False,
    )

    def validate_specs(self, value):
        if value is not None and not isinstance(value, dict):
            raise serializers.ValidationError("specs must be a JSON object")
        return value


class ProductUpdateSerializer(ProductCreateSerializer):
    """Serializer for updating product; every field optional."""

    name = serializers.CharField(max_length=200, required=False)


class ProductListResponseSerializer(serializers.Serializer):
    """Paginated product list."""

    items = ProductSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class ProductSearchResponseSerializer(serializers.Serializer):
    """Quick product lookup result."""

    items = ProductSerializer(many=True)
