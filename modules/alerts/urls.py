"""
Alerts URL configuration.
"""
from django.urls import path

from .views import AlertSummaryView

app_name = 'alerts'

urlpatterns = [
    path('summary/', AlertSummaryView.as_view(), name='alert-summary'),
]
