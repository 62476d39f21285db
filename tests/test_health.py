"""
Tests for the health check endpoints.
"""
from unittest.mock import patch

import pytest
from rest_framework import status


def test_health(api_client):
    response = api_client.get('/api/v1/health/')

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {'status': 'healthy'}


def test_liveness(api_client):
    response = api_client.get('/api/v1/health/live/')

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {'status': 'alive'}


@pytest.mark.django_db
def test_readiness(api_client):
    response = api_client.get('/api/v1/health/ready/')

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body['status'] == 'ready'
    assert body['checks']['database'] == {'healthy': True}
    assert body['checks']['cache'] == {'healthy': True}


@pytest.mark.django_db
def test_readiness_reports_failed_dependency(api_client):
    def broken():
        raise ConnectionError('redis unreachable')

    with patch.dict('shared.health.views.READINESS_CHECKS', {'cache': broken}):
        response = api_client.get('/api/v1/health/ready/')

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    body = response.json()
    assert body['status'] == 'not_ready'
    assert body['checks']['cache'] == {'healthy': False, 'error': 'redis unreachable'}
    assert body['checks']['database'] == {'healthy': True}
