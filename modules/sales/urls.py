"""
Sales URL configuration.
"""
from django.urls import path

from .views import SaleListCreateView, SaleDetailView

app_name = 'sales'

urlpatterns = [
    path('', SaleListCreateView.as_view(), name='sale-list-create'),
    path('<int:sale_id>/', SaleDetailView.as_view(), name='sale-detail'),
]
