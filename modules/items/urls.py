"""
Items URL configuration.
"""
from django.urls import path

from .views import ItemListCreateView, SellableItemsView, ItemDetailView, ItemMovementsView

app_name = 'items'

urlpatterns = [
    path('', ItemListCreateView.as_view(), name='item-list-create'),
    path('sellable/', SellableItemsView.as_view(), name='item-sellable'),
    path('<int:item_id>/', ItemDetailView.as_view(), name='item-detail'),
    path('<int:item_id>/movements/', ItemMovementsView.as_view(), name='item-movements'),
]
