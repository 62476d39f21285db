"""
Products module admin configuration.
"""
from django.contrib import admin

from .models import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'brand', 'model', 'category', 'created_at')
    list_filter = ('category', 'brand', 'created_at')
    search_fields = ('name', 'brand', 'model', 'category__path')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {'fields': ('name', 'brand', 'model', 'category')}),
        ('Details', {'fields': ('specs', 'image_urls')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at')}),
    )
