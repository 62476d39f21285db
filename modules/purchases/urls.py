"""
Purchases URL configuration.
"""
from django.urls import path

from .views import PurchaseListCreateView, PurchaseDetailView, PurchaseReceiveView

app_name = 'purchases'

urlpatterns = [
    path('', PurchaseListCreateView.as_view(), name='purchase-list-create'),
    path('<int:purchase_id>/', PurchaseDetailView.as_view(), name='purchase-detail'),
    path('<int:purchase_id>/receive/', PurchaseReceiveView.as_view(), name='purchase-receive'),
]
