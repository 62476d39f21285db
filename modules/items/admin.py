"""
Items module admin configuration.
"""
from django.contrib import admin

from .models import InventoryMovementModel, ItemModel


class InventoryMovementInline(admin.TabularInline):
    """Inline admin for item movements."""
    model = InventoryMovementModel
    extra = 0
    readonly_fields = ('movement', 'qty', 'reference', 'notes', 'created_at')
    can_delete = False


@admin.register(ItemModel)
class ItemAdmin(admin.ModelAdmin):
    """Admin configuration for Item model."""
    list_display = ('serial', 'product', 'condition', 'status', 'purchase_toman', 'sold_price_toman', 'acquired_at')
    list_filter = ('status', 'condition', 'sale_channel', 'acquired_at')
    search_fields = ('serial', 'product__name', 'product__brand', 'product__model', 'buyer_name')
    ordering = ('-created_at',)
    readonly_fields = ('purchase_line', 'created_at', 'updated_at')
    inlines = [InventoryMovementInline]

    fieldsets = (
        (None, {'fields': ('product', 'serial', 'condition', 'status', 'location')}),
        ('Cost', {'fields': ('acquired_at', 'purchase_toman', 'fees_toman', 'refurb_toman', 'purchase_line')}),
        ('Listing', {'fields': ('listed_channel', 'listed_price_toman', 'listed_at')}),
        ('Sale', {'fields': ('sold_at', 'sold_price_toman', 'sale_channel', 'buyer_name')}),
        ('Details', {'fields': ('notes', 'images')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at')}),
    )


@admin.register(InventoryMovementModel)
class InventoryMovementAdmin(admin.ModelAdmin):
    """Admin configuration for Inventory Movement model."""
    list_display = ('id', 'item', 'movement', 'qty', 'reference', 'created_at')
    list_filter = ('movement', 'created_at')
    search_fields = ('item__serial', 'reference')
    ordering = ('-created_at',)
    readonly_fields = ('created_at',)
