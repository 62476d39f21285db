"""
Purchases module admin configuration.
"""
from django.contrib import admin

from .models import PurchaseLineModel, PurchaseModel


class PurchaseLineInline(admin.TabularInline):
    """Inline admin for purchase lines."""
    model = PurchaseLineModel
    extra = 0
    readonly_fields = ('product', 'quantity', 'unit_toman', 'fees_toman')
    can_delete = False


@admin.register(PurchaseModel)
class PurchaseAdmin(admin.ModelAdmin):
    """Admin configuration for Purchase model."""
    list_display = ('id', 'supplier_name', 'reference', 'channel', 'total_toman', 'ordered_at')
    list_filter = ('channel', 'ordered_at')
    search_fields = ('supplier_name', 'reference')
    ordering = ('-ordered_at',)
    readonly_fields = ('total_toman', 'created_at', 'updated_at')
    inlines = [PurchaseLineInline]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
