"""
Purchases module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import PurchaseService
from .serializers import (
    PurchaseSerializer,
    PurchaseSummarySerializer,
    PurchaseCreateSerializer,
    PurchaseReceiveSerializer,
)


class PurchaseListCreateView(APIView):
    """Recent purchases and create."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.purchase_service = PurchaseService()

    @extend_schema(
        tags=['Purchases'],
        summary='List recent purchases',
        description='Latest 20 purchases with ordered and received unit counts.',
        responses={200: PurchaseSummarySerializer(many=True)},
    )
    def get(self, request):
        purchases = self.purchase_service.list_purchases()
        return Response(PurchaseSummarySerializer(purchases, many=True).data)

    @extend_schema(
        tags=['Purchases'],
        summary='Create purchase',
        request=PurchaseCreateSerializer,
        responses={201: PurchaseSerializer},
    )
    def post(self, request):
        serializer = PurchaseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        purchase = self.purchase_service.create_purchase(**serializer.validated_data)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_201_CREATED)


class PurchaseDetailView(APIView):
    """Purchase detail operations."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.purchase_service = PurchaseService()

    @extend_schema(tags=['Purchases'], summary='Get purchase', responses={200: PurchaseSerializer})
    def get(self, request, purchase_id):
        purchase = self.purchase_service.get_purchase(purchase_id)
        return Response(PurchaseSerializer(purchase).data)

    @extend_schema(
        tags=['Purchases'],
        summary='Delete purchase',
        description='Also deletes the items received from it and their movements.',
        responses={204: None},
    )
    def delete(self, request, purchase_id):
        self.purchase_service.delete_purchase(purchase_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PurchaseReceiveView(APIView):
    """Receive the ordered units into stock."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.purchase_service = PurchaseService()

    @extend_schema(
        tags=['Purchases'],
        summary='Receive purchase',
        description='Creates one item per ordered unit. 201 on first receipt, 200 when already received.',
        request=None,
        responses={200: PurchaseReceiveSerializer, 201: PurchaseReceiveSerializer},
    )
    def post(self, request, purchase_id):
        result = self.purchase_service.receive_purchase(purchase_id)
        response_status = status.HTTP_200_OK if result['already_received'] else status.HTTP_201_CREATED
        return Response(PurchaseReceiveSerializer(result).data, status=response_status)
