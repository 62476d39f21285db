"""
Alerts API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.utils import parse_positive_int

from .services import AlertService, DEFAULT_LIMIT
from .serializers import AlertSummarySerializer


class AlertSummaryView(APIView):
    """Aging stock, stale listings and low-margin sales."""

    @extend_schema(
        tags=['Alerts'],
        summary='Get alert summary',
        parameters=[
            OpenApiParameter(name='limit', type=int, required=False, description='Items per section (default 5, max 20)'),
        ],
        responses={200: AlertSummarySerializer},
    )
    def get(self, request):
        limit = parse_positive_int(request.query_params.get('limit'), DEFAULT_LIMIT, name='limit')
        summary = AlertService().get_summary(limit=limit)
        return Response(AlertSummarySerializer(summary).data)
