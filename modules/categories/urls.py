"""
Categories URL configuration.
"""
from django.urls import path

from .views import (
    CategoryListCreateView,
    CategoryDetailView,
    CategorySubcategoriesView,
    CategoryReorderView,
    CategoryRebuildPathsView,
)

app_name = 'categories'

urlpatterns = [
    path('', CategoryListCreateView.as_view(), name='category-list-create'),
    path('reorder/', CategoryReorderView.as_view(), name='category-reorder'),
    path('<int:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('<int:category_id>/subcategories/', CategorySubcategoriesView.as_view(), name='category-subcategories'),
    path('<int:category_id>/rebuild-paths/', CategoryRebuildPathsView.as_view(), name='category-rebuild-paths'),
]
