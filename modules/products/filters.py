"""
Products list filters.
"""
import django_filters
from django.db.models import Q

from .models import ProductModel


class ProductFilter(django_filters.FilterSet):
    """Filter for the product list endpoint."""

    # Basic search - name, brand and model
    q = django_filters.CharFilter(method='filter_search', label='Search')

    category_id = django_filters.NumberFilter(field_name='category_id', lookup_expr='exact')
    brand = django_filters.CharFilter(field_name='brand', lookup_expr='iexact')

    # Category and all of its descendants
    in_category = django_filters.NumberFilter(method='filter_in_category', label='Category subtree')

    class Meta:
        model = ProductModel
        fields = ['q', 'category_id', 'brand', 'in_category']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(brand__icontains=value) |
            Q(model__icontains=value)
        )

    def filter_in_category(self, queryset, name, value):
        from modules.categories.models import CategoryModel
        from modules.categories.tree import collect_subtree_ids

        if not CategoryModel.objects.filter(pk=value).exists():
            return queryset.none()
        return queryset.filter(category_id__in=collect_subtree_ids(value))
