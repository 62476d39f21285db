"""
Sales module Django ORM models.
"""
from django.db import models
from django.utils import timezone

from modules.items.models import CHANNEL_CHOICES


class SaleModel(models.Model):
    """Sale of one or more items to a customer."""

    customer_name = models.CharField(
        max_length=200,
        verbose_name='Customer name'
    )
    channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        verbose_name='Channel'
    )
    reference = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name='Reference',
        help_text='Invoice or order number'
    )
    ordered_at = models.DateTimeField(
        default=timezone.now,
        verbose_name='Ordered at'
    )
    total_toman = models.PositiveBigIntegerField(
        default=0,
        verbose_name='Total',
        help_text='Sum of line prices, Toman'
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
        db_table = 'sales'
        verbose_name = 'Sale'
        verbose_name_plural = 'Sales'
        ordering = ['-ordered_at', '-id']

    def __str__(self):
        return self.reference or f"Sale {self.id} - {self.customer_name}"


class SaleLineModel(models.Model):
    """Sale line: one item at its sale price."""

    sale = models.ForeignKey(
        SaleModel,
        on_delete=models.CASCADE,
        related_name='lines',
        verbose_name='Sale'
    )
    item = models.ForeignKey(
        'items.ItemModel',
        on_delete=models.PROTECT,
        related_name='sale_lines',
        verbose_name='Item'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='sale_lines',
        verbose_name='Product'
    )
    unit_toman = models.PositiveBigIntegerField(
        verbose_name='Unit price',
        help_text='Toman'
    )

    class Meta:
        db_table = 'sale_lines'
        verbose_name = 'Sale Line'
        verbose_name_plural = 'Sale Lines'
        ordering = ['id']

    def __str__(self):
        return f"Sale {self.sale_id} - Item {self.item_id}"
