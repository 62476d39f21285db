"""
Categories serializers.
"""
from rest_framework import serializers

from .models import CategoryModel


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for categories."""

    parent_id = serializers.IntegerField(read_only=True, allow_null=True)
    depth = serializers.IntegerField(read_only=True)
    children_count = serializers.SerializerMethodField()

    class Meta:
        model = CategoryModel
        fields = [
            'id',
            'name',
            'slug',
            'path',
            'parent_id',
            'sort_order',
            'depth',
            'children_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'slug', 'path', 'created_at', 'updated_at']

    def get_children_count(self, obj) -> int:
        """Get number of direct children."""
        return obj.children.count()


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for creating category."""

    name = serializers.CharField(max_length=100)
    parent_id = serializers.IntegerField(required=False, allow_null=True)
    sort_order = serializers.IntegerField(required=False)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for updating category."""

    name = serializers.CharField(max_length=100, required=False)
    parent_id = serializers.IntegerField(required=False, allow_null=True)
    sort_order = serializers.IntegerField(required=False)


class CategoryReorderSerializer(serializers.Serializer):
    """Serializer for reordering a sibling set."""

    parent_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    ordered_ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=True,
    )


class CategoryTreeSerializer(serializers.Serializer):
    """Serializer for category tree structure."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    path = serializers.CharField()
    parent_id = serializers.IntegerField(allow_null=True)
    sort_order = serializers.IntegerField()
    product_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
    children = serializers.ListField(
        child=serializers.DictField(),
        required=False
    )


class MessageSerializer(serializers.Serializer):
    """Plain confirmation message."""

    message = serializers.CharField()


class CategoryRebuildSerializer(serializers.Serializer):
    """Result of a path rebuild."""

    message = serializers.CharField()
    category = CategorySerializer()
