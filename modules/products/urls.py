"""
Products URL configuration.
"""
from django.urls import path

from .views import ProductListCreateView, ProductSearchView, ProductDetailView

app_name = 'products'

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list-create'),
    path('search/', ProductSearchView.as_view(), name='product-search'),
    path('<int:product_id>/', ProductDetailView.as_view(), name='product-detail'),
]
