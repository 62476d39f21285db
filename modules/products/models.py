"""
Products module Django ORM models.
"""
from django.db import models


class ProductModel(models.Model):
    """Catalog product, optionally filed under a category."""

    name = models.CharField(
        max_length=200,
        db_index=True,
        verbose_name='Name'
    )
    brand = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        verbose_name='Brand'
    )
    model = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        verbose_name='Model'
    )
    category = models.ForeignKey(
        'categories.CategoryModel',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    specs = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Specifications'
    )
    image_urls = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Image URLs'
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
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category'], name='products_category_idx'),
            models.Index(fields=['brand'], name='products_brand_idx'),
        ]

    def __str__(self):
        if self.brand:
            return f"{self.brand} {self.name}"
        return self.name
