"""
Products module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.utils import parse_positive_int

from .services import ProductService, DEFAULT_PAGE_SIZE
from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
    ProductListResponseSerializer,
    ProductSearchResponseSerializer,
)


product_service = ProductService()


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):
    """Product list and create endpoint."""

    @extend_schema(
        summary="List products",
        parameters=[
            OpenApiParameter(name='q', type=str, required=False, description='Search in name, brand and model'),
            OpenApiParameter(name='category_id', type=int, required=False, description='Exact category'),
            OpenApiParameter(name='in_category', type=int, required=False, description='Category including its descendants'),
            OpenApiParameter(name='brand', type=str, required=False, description='Brand (case-insensitive)'),
            OpenApiParameter(name='page', type=int, required=False, description='Page number (default 1)'),
            OpenApiParameter(name='page_size', type=int, required=False, description='Page size (default 20, max 100)'),
        ],
        responses={200: ProductListResponseSerializer},
    )
    def get(self, request):
        page = parse_positive_int(request.query_params.get('page'), 1, name='page')
        page_size = parse_positive_int(
            request.query_params.get('page_size'), DEFAULT_PAGE_SIZE, name='page_size'
        )

        result = product_service.list_products(
            filters=request.query_params,
            page=page,
            page_size=page_size,
        )
        result['items'] = ProductSerializer(result['items'], many=True).data
        return Response(result)

    @extend_schema(
        summary="Create product",
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.create_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductSearchView(APIView):
    """Quick product lookup for pickers."""

    @extend_schema(
        summary="Search products",
        parameters=[
            OpenApiParameter(name='q', type=str, required=False, description='Search in name, brand and model'),
        ],
        responses={200: ProductSearchResponseSerializer},
    )
    def get(self, request):
        products = product_service.search_products(request.query_params.get('q'))
        return Response({'items': ProductSerializer(products, many=True).data})


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail operations."""

    @extend_schema(summary="Get product", responses={200: ProductSerializer})
    def get(self, request, product_id):
        product = product_service.get_product(product_id)
        return Response(ProductSerializer(product).data)

    @extend_schema(
        summary="Update product",
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer},
    )
    def patch(self, request, product_id):
        serializer = ProductUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = product_service.update_product(product_id, **serializer.validated_data)
        return Response(ProductSerializer(product).data)

    @extend_schema(summary="Delete product", responses={204: None})
    def delete(self, request, product_id):
        product_service.delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
