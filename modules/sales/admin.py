"""
Sales module admin configuration.
"""
from django.contrib import admin

from .models import SaleLineModel, SaleModel


class SaleLineInline(admin.TabularInline):
    """Inline admin for sale lines."""
    model = SaleLineModel
    extra = 0
    readonly_fields = ('item', 'product', 'unit_toman')
    can_delete = False


@admin.register(SaleModel)
class SaleAdmin(admin.ModelAdmin):
    """Admin configuration for Sale model.

    Read-only: deleting a sale must relist its items, which the API does.
    """
    list_display = ('id', 'customer_name', 'channel', 'reference', 'total_toman', 'ordered_at')
    list_filter = ('channel', 'ordered_at')
    search_fields = ('customer_name', 'reference', 'lines__item__serial')
    ordering = ('-ordered_at',)
    readonly_fields = ('customer_name', 'channel', 'reference', 'ordered_at', 'total_toman', 'created_at', 'updated_at')
    inlines = [SaleLineInline]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
