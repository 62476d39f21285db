"""
Categories admin configuration.
"""
from django.contrib import admin

from .models import CategoryModel
from .services import CategoryService


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin for categories.

    Categories are created through the API; edits made here go through
    CategoryService so slugs and paths are regenerated.
    """

    list_display = [
        'id',
        'name',
        'slug',
        'path',
        'parent',
        'sort_order',
        'updated_at',
    ]
    list_filter = ['parent', 'created_at']
    search_fields = ['name', 'slug', 'path']
    readonly_fields = ['id', 'slug', 'path', 'parent', 'created_at', 'updated_at']
    ordering = ['path']

    fieldsets = (
        (None, {
            'fields': ('name', 'sort_order')
        }),
        ('Hierarchy', {
            'fields': ('parent', 'slug', 'path')
        }),
        ('Info', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False

    def save_model(self, request, obj, form, change):
        """
        Persist through CategoryService instead of ``super().save_model``.

        ``parent``, ``slug`` and ``path`` are read-only here and adding is
        disabled, so only existing rows reach this point and ``change`` is
        always true. ``update_category`` applies the name and sort order,
        regenerates the slug and rewrites the subtree paths.
        """
        CategoryService().update_category(
            obj.pk,
            name=obj.name,
            sort_order=obj.sort_order,
        )
