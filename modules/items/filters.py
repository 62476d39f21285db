"""
Items list filters.
"""
import django_filters
from django.db.models import Q

from .models import ItemModel


class ItemFilter(django_filters.FilterSet):
    """Filter for the item list endpoint."""

    # Serial and product name, brand and model
    q = django_filters.CharFilter(method='filter_search', label='Search')

    status = django_filters.MultipleChoiceFilter(choices=ItemModel.STATUS_CHOICES)
    condition = django_filters.MultipleChoiceFilter(choices=ItemModel.CONDITION_CHOICES)
    product_id = django_filters.NumberFilter(field_name='product_id', lookup_expr='exact')
    category_id = django_filters.NumberFilter(field_name='product__category_id', lookup_expr='exact')

    class Meta:
        model = ItemModel
        fields = ['q', 'status', 'condition', 'product_id', 'category_id']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(serial__icontains=value) |
            Q(product__name__icontains=value) |
            Q(product__brand__icontains=value) |
            Q(product__model__icontains=value)
        )
