"""
Items module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.utils import parse_positive_int

from .services import ItemService, DEFAULT_PAGE_SIZE
from .serializers import (
    ItemSerializer,
    ItemDetailSerializer,
    ItemCreateSerializer,
    ItemUpdateSerializer,
    ItemListResponseSerializer,
    MovementSerializer,
    MovementCreateSerializer,
    SellableItemsResponseSerializer,
)


item_service = ItemService()


@extend_schema(tags=['Items'])
class ItemListCreateView(APIView):
    """Item list and create endpoint."""

    @extend_schema(
        summary="List items",
        parameters=[
            OpenApiParameter(name='q', type=str, required=False, description='Search in serial and product name, brand and model'),
            OpenApiParameter(name='status', type=str, required=False, many=True, description='Item status (repeatable)'),
            OpenApiParameter(name='condition', type=str, required=False, many=True, description='Item condition (repeatable)'),
            OpenApiParameter(name='product_id', type=int, required=False, description='Product'),
            OpenApiParameter(name='category_id', type=int, required=False, description='Category of the product'),
            OpenApiParameter(name='page', type=int, required=False, description='Page number (default 1)'),
            OpenApiParameter(name='page_size', type=int, required=False, description='Page size (default 20, max 100)'),
        ],
        responses={200: ItemListResponseSerializer},
    )
    def get(self, request):
        page = parse_positive_int(request.query_params.get('page'), 1, name='page')
        page_size = parse_positive_int(
            request.query_params.get('page_size'), DEFAULT_PAGE_SIZE, name='page_size'
        )

        result = item_service.list_items(
            filters=request.query_params,
            page=page,
            page_size=page_size,
        )
        result['items'] = ItemSerializer(result['items'], many=True).data
        return Response(result)

    @extend_schema(
        summary="Create item",
        description="Records a PURCHASE_IN movement for the new item.",
        request=ItemCreateSerializer,
        responses={201: ItemSerializer},
    )
    def post(self, request):
        serializer = ItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = item_service.create_item(**serializer.validated_data)
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Items'])
class SellableItemsView(APIView):
    """Items that can be added to a sale."""

    @extend_schema(
        summary="List sellable items",
        parameters=[
            OpenApiParameter(name='search', type=str, required=False, description='Search in serial and product name, brand and model'),
        ],
        responses={200: SellableItemsResponseSerializer},
    )
    def get(self, request):
        items = item_service.get_sellable_items(search=request.query_params.get('search'))
        return Response({'items': ItemSerializer(items, many=True).data})


@extend_schema(tags=['Items'])
class ItemDetailView(APIView):
    """Item detail operations."""

    @extend_schema(summary="Get item with movements", responses={200: ItemDetailSerializer})
    def get(self, request, item_id):
        item = item_service.get_item(item_id)
        return Response(ItemDetailSerializer(item).data)

    @extend_schema(
        summary="Update item",
        description="Marking an item SOLD requires sold_price_toman and records a SALE_OUT movement.",
        request=ItemUpdateSerializer,
        responses={200: ItemSerializer},
    )
    def patch(self, request, item_id):
        serializer = ItemUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        item = item_service.update_item(item_id, **serializer.validated_data)
        return Response(ItemSerializer(item).data)


@extend_schema(tags=['Items'])
class ItemMovementsView(APIView):
    """Movement history of an item."""

    @extend_schema(summary="List item movements", responses={200: MovementSerializer(many=True)})
    def get(self, request, item_id):
        movements = item_service.get_movements(item_id)
        return Response(MovementSerializer(movements, many=True).data)

    @extend_schema(
        summary="Add item movement",
        request=MovementCreateSerializer,
        responses={201: MovementSerializer},
    )
    def post(self, request, item_id):
        serializer = MovementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        movement = item_service.add_movement(item_id, **serializer.validated_data)
        return Response(MovementSerializer(movement).data, status=status.HTTP_201_CREATED)
