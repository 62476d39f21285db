"""
Categories models.
"""
from django.db import models


class CategoryModel(models.Model):
    """Product category with a materialized slug path."""

    name = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=120,
        unique=True,
        verbose_name='Slug'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent category',
        help_text='Null for root categories'
    )
    path = models.TextField(
        blank=True,
        default='',
        verbose_name='Path',
        help_text='Ancestor slugs joined by "/", root first'
    )
    sort_order = models.IntegerField(
        default=0,
        verbose_name='Sort order',
        help_text='Ordering among siblings'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    class Meta:
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['sort_order', 'name']
        indexes = [
            models.Index(fields=['parent', 'sort_order'], name='categories_parent_sort_idx'),
        ]

    def __str__(self):
        return self.path or self.name

    @property
    def depth(self) -> int:
        """Number of ancestors, derived from the materialized path."""
        if not self.path:
            return 0
        return self.path.count('/')
