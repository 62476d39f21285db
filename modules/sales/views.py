"""
Sales module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import SaleService
from .serializers import SaleSerializer, SaleSummarySerializer, SaleCreateSerializer


class SaleListCreateView(APIView):
    """Recent sales and create."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.sale_service = SaleService()

    @extend_schema(
        tags=['Sales'],
        summary='List recent sales',
        description='Latest 20 sales with line and fulfilment counts.',
        responses={200: SaleSummarySerializer(many=True)},
    )
    def get(self, request):
        sales = self.sale_service.list_sales()
        return Response(SaleSummarySerializer(sales, many=True).data)

    @extend_schema(
        tags=['Sales'],
        summary='Create sale',
        description='Marks every listed item SOLD and records its SALE_OUT movement.',
        request=SaleCreateSerializer,
        responses={201: SaleSerializer},
    )
    def post(self, request):
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sale = self.sale_service.create_sale(**serializer.validated_data)
        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)


class SaleDetailView(APIView):
    """Sale detail operations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.sale_service = SaleService()

    @extend_schema(tags=['Sales'], summary='Get sale', responses={200: SaleSerializer})
    def get(self, request, sale_id):
        sale = self.sale_service.get_sale(sale_id)
        return Response(SaleSerializer(sale).data)

    @extend_schema(
        tags=['Sales'],
        summary='Delete sale',
        description='Relists the sold items and removes their SALE_OUT movements.',
        responses={204: None},
    )
    def delete(self, request, sale_id):
        self.sale_service.delete_sale(sale_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
