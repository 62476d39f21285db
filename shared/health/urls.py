"""
Health check URLs.
"""
from django.urls import path

from .views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('', HealthCheckView.as_view(), name='health'),
    path('ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('live/', LivenessCheckView.as_view(), name='health-live'),
]
