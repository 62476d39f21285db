"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


def _check_database() -> None:
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')


def _check_cache() -> None:
    cache.set('health_check', 'ok', 10)
    if cache.get('health_check') != 'ok':
        raise RuntimeError('Cache read/write failed')


READINESS_CHECKS = {
    'database': _check_database,
    'cache': _check_cache,
}


@extend_schema(exclude=True)
class HealthCheckView(APIView):
    """Basic health check endpoint."""

    def get(self, request):
        return Response({'status': 'healthy'})


@extend_schema(exclude=True)
class ReadinessCheckView(APIView):
    """Readiness check - verifies all dependencies are available."""

    def get(self, request):
        checks = {}
        for name, check in READINESS_CHECKS.items():
            try:
                check()
                checks[name] = {'healthy': True}
            except Exception as e:
                logger.warning(f"Readiness check '{name}' failed: {e}")
                checks[name] = {'healthy': False, 'error': str(e)}

        all_healthy = all(check['healthy'] for check in checks.values())

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )


@extend_schema(exclude=True)
class LivenessCheckView(APIView):
    """Liveness check - basic app responsiveness."""

    def get(self, request):
        return Response({'status': 'alive'})
