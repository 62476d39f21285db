"""
Categories API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import CategoryService
from .serializers import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryUpdateSerializer,
    CategoryReorderSerializer,
    CategoryTreeSerializer,
    CategoryRebuildSerializer,
    MessageSerializer,
)


class CategoryListCreateView(APIView):
    """Category tree and create."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get category tree',
        description='Root categories with nested children, ordered by sort order then name.',
        responses={200: CategoryTreeSerializer(many=True)},
    )
    def get(self, request):
        """Get full category tree."""
        tree = self.category_service.get_category_tree()
        return Response(tree)

    @extend_schema(
        tags=['Categories'],
        summary='Create category',
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
    )
    def post(self, request):
        """Create a new category."""
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = self.category_service.create_category(**serializer.validated_data)

        result_serializer = CategorySerializer(category)
        return Response(result_serializer.data, status=status.HTTP_201_CREATED)


class CategoryDetailView(APIView):
    """Category detail operations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get category',
        responses={200: CategorySerializer},
    )
    def get(self, request, category_id):
        """Get category by ID."""
        category = self.category_service.get_category(category_id)
        serializer = CategorySerializer(category)
        return Response(serializer.data)

    @extend_schema(
        tags=['Categories'],
        summary='Update category',
        description='Renaming regenerates the slug; renaming or moving rebuilds paths of the subtree.',
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
    )
    def patch(self, request, category_id):
        """Update a category."""
        serializer = CategoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = self.category_service.update_category(
            category_id=category_id,
            **serializer.validated_data
        )

        result_serializer = CategorySerializer(category)
        return Response(result_serializer.data)

    @extend_schema(
        tags=['Categories'],
        summary='Delete category',
        responses={200: MessageSerializer},
    )
    def delete(self, request, category_id):
        """Delete a category without children or products."""
        self.category_service.delete_category(category_id=category_id)
        return Response({'message': 'Category deleted'})


class CategorySubcategoriesView(APIView):
    """Get subcategories of a category."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Get subcategories',
        responses={200: CategorySerializer(many=True)},
    )
    def get(self, request, category_id):
        """Get direct children of a category."""
        subcategories = self.category_service.get_subcategories(category_id)
        serializer = CategorySerializer(subcategories, many=True)
        return Response(serializer.data)


class CategoryReorderView(APIView):
    """Reorder a sibling set."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Reorder categories',
        request=CategoryReorderSerializer,
        responses={200: MessageSerializer},
    )
    def post(self, request):
        """Assign sort orders in the given order."""
        serializer = CategoryReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.category_service.reorder_categories(**serializer.validated_data)
        return Response({'message': 'Reordered categories'})


class CategoryRebuildPathsView(APIView):
    """Repair materialized paths of a subtree."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.category_service = CategoryService()

    @extend_schema(
        tags=['Categories'],
        summary='Rebuild category paths',
        request=None,
        responses={200: CategoryRebuildSerializer},
    )
    def post(self, request, category_id):
        """Recompute paths for the category and its descendants."""
        category = self.category_service.rebuild_paths(category_id)
        return Response({
            'message': 'Category paths rebuilt',
            'category': CategorySerializer(category).data,
        })
